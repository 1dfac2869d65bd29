"""
Create a `mandala.pdf` file, with something resembling a mandala on it.

Usage: python mandala.py [number of segments, 7 by default]
"""

import math
import sys

from simple_pdf import Color, Matrix, Pdf, pt


def draw_mandala(c, n):
    c.concat(Matrix.translate(pt(300), pt(300)))
    c.set_stroke_color(Color.gray(0))
    segment = 2 * math.pi / n
    for _ in range(n):
        c.move_to(pt(0), pt(33.5))
        c.line_to(pt(0), pt(250))
        r = pt(99)
        c.circle(pt(0), r, r * 1.25 * segment)
        d = pt(141.4)
        rr = pt(36)
        c.circle(pt(0), d + rr, rr)
        c.stroke()
        c.concat(Matrix.rotate(segment))
    c.concat(Matrix.rotate(segment / 2))
    for _ in range(n):
        r0 = pt(58.66)
        r = 0.7705 * r0 * segment
        for _ in range((n + 1) // 3):
            c.circle(pt(0), r0, r)
            r2 = 1.058 * r
            r0 = r0 + r + r2
            r = r2
        c.stroke()
        c.concat(Matrix.rotate(segment))


def main(argv):
    n = int(argv[1]) if len(argv) > 1 else 7
    with Pdf.create("mandala.pdf") as document:
        document.render_page(pt(600), pt(600), lambda c: draw_mandala(c, n))


if __name__ == "__main__":
    main(sys.argv)
