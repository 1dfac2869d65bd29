"""
Create a `text.pdf` file, showing the text placement helpers,
a free-form text object, and the three kinds of builtin font encodings.
"""

from simple_pdf import BuiltinFont, Color, Pdf, Points, mm, pt

H = mm(297).to(Points)
W = mm(210).to(Points)


def draw(c):
    c.set_stroke_color(Color.rgb(200, 200, 255))
    # An invalid dash pattern, that leaves the solid line unchanged
    c.set_dash([pt(0), pt(0), pt(0)], pt(-0.5))
    c.rectangle(pt(10), pt(10), W - pt(20), H - pt(20))
    c.line(pt(10), H / 2, W - pt(10), H / 2)
    c.line(W / 2, pt(10), W / 2, H - pt(10))
    c.stroke()

    helvetica = BuiltinFont.HELVETICA
    c.left_text(pt(10), H - pt(20), helvetica, pt(12), "Top left")
    c.left_text(pt(10), pt(10), helvetica, pt(12), "Bottom left")
    c.right_text(W - pt(10), H - pt(20), helvetica, pt(12), "Top right")
    c.right_text(W - pt(10), pt(10), helvetica, pt(12), "Bottom right")
    c.center_text(W / 2, H - pt(30), BuiltinFont.TIMES_BOLD, pt(24), "Centered")

    times = c.get_font(BuiltinFont.TIMES_ROMAN)

    def paragraph(t):
        t.set_font(times, pt(14))
        t.set_leading(pt(18))
        t.pos(pt(10), H - pt(100))
        t.show("Some lines of text in what might look like a")
        t.show_line("paragraph of three lines. Lorem ipsum dolor")
        t.show_line("sit amet. Blahonga. ")
        t.show_adjusted([("W", 130), ("AN", -40), ("D", 0)])
        t.pos(pt(0), pt(-30))
        t.show_adjusted([("o", 16 * i) for i in range(-19, 21)])

    c.text(paragraph)

    times_italic = BuiltinFont.TIMES_ITALIC
    for y, line in (
        (500, "På svenska använder vi bokstäverna å, ä & ö"),
        (480, "i ord som slånbärslikör. Därför använder"),
        (460, "simple_pdf /WinAnsiEncoding för text."),
    ):
        c.right_text(W - pt(10), pt(y), times_italic, pt(14), line)

    c.center_text(W / 2, pt(400), BuiltinFont.SYMBOL, pt(14), "Hellas ΑΒΓΔαβγδ")
    c.center_text(W / 2, pt(380), BuiltinFont.SYMBOL, pt(14), "∀ μ < δ : ∃ σ ∈ Σ")
    c.center_text(
        W / 2,
        pt(320),
        BuiltinFont.ZAPFDINGBATS,
        pt(18),
        "☎  ✌  ✖  ✤  ✰ ✴  ❐  ❝  ❤  ❞",
    )


def main():
    with Pdf.create("text.pdf") as document:
        document.set_title("Text example")
        document.render_page(W, H, draw)


if __name__ == "__main__":
    main()
