"""
Create a `circles.pdf` file, with a single page containing a circle
stroked in black, overwritten with a circle in a finer yellow stroke.

The black circle is drawn with `Canvas.circle()`, that approximates a circle
with four Bézier curves. The yellow circle is drawn as a 200-sided polygon.
"""

import math

from simple_pdf import Color, Pdf, pt


def draw(c):
    x, y = pt(200), pt(200)
    r = pt(190)

    # Set a wide black pen and stroke a circle
    c.set_stroke_color(Color.rgb(0, 0, 0))
    c.set_line_width(pt(2))
    c.circle(x, y, r)
    c.stroke()

    # Set a finer yellow pen and stroke a 200-sided polygon
    c.set_stroke_color(Color.rgb(255, 230, 150))
    c.set_line_width(pt(1))
    c.move_to(x + r, y)
    sides = 200
    for n in range(1, sides):
        phi = n * 2 * math.pi / sides
        c.line_to(x + r * math.cos(phi), y + r * math.sin(phi))
    c.close_and_stroke()


def main():
    with Pdf.create("circles.pdf") as document:
        document.render_page(pt(400), pt(400), draw)


if __name__ == "__main__":
    main()
