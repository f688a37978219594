from bs4 import BeautifulSoup

from linemark import Charset, Diagnostic
from linemark.html import html_diagnostic

LINE = "Strin::nouveau().i_like_tests(3.14158)"


def flagship():
    return (
        Diagnostic(LINE)
        .message("unknown method String::new")
        .label(0, 5, "you probably meant String")
        .label(30, 37, "\x1b[31myour π is bad\x1b[0m")
        .label(17, 18, "caps: I")
        .label(7, 16, "use new()")
        .note("help: read the manual")
    )


def soup_of(diagnostic, **kwargs):
    return BeautifulSoup(str(html_diagnostic(diagnostic, **kwargs)), "html.parser")


def test_structure():
    soup = soup_of(flagship())
    root = soup.find("div", class_="linemark")
    assert root is not None, f"Root div not found. HTML snippet: {soup.prettify()}"
    assert root.find("style") is not None
    assert root.find("h3").text == "unknown method String::new"
    assert root.find("p", class_="note").text == "help: read the manual"


def test_marks_in_line_order():
    soup = soup_of(flagship())
    codeline = soup.find("span", class_="codeline")
    assert codeline is not None
    assert codeline["data-lineno"] == "0"
    marks = codeline.find_all("mark")
    assert [m.text for m in marks] == ["Strin", "nouveau()", "i", "3.14158"]
    assert [m["data-label"] for m in marks] == [
        "you probably meant String",
        "use new()",
        "caps: I",
        "your π is bad",
    ]


def test_line_text_preserved():
    codeline = soup_of(flagship()).find("span", class_="codeline")
    gutter = codeline.find("span", class_="gutter").text
    assert codeline.text == gutter + LINE


def test_pre_matches_text_render():
    """The <pre> block holds the same diagram as render(), minus header and note."""
    d = flagship()
    pre = soup_of(d).find("pre")
    rows = d.render().split("\n")[1:-1]
    assert pre.get_text() == "\n".join(rows).replace(
        "\x1b[31myour π is bad\x1b[0m", "your π is bad"
    )


def test_compact_rows():
    line = "x  y" + " " * 16 + "z" + " " * 19 + "w"
    d = (
        Diagnostic(line)
        .label(0, 1, "four")
        .label(3, 4, "b")
        .label(20, 21, "c" * 30)
        .label(40, 41, "dd")
    )
    stacked = soup_of(d).find("pre").get_text().split("\n")
    packed = soup_of(d, compact=True).find("pre").get_text().split("\n")
    assert len(stacked) == 4
    assert len(packed) == 3


def test_point_span_mark_is_empty():
    soup = soup_of(Diagnostic("abc").label(3, 3, "missing ;"))
    mark = soup.find("mark")
    assert mark.text == ""
    assert mark["data-label"] == "missing ;"


def test_multibyte_line():
    soup = soup_of(Diagnostic("héllo wörld").label(7, 13, "typo"))
    assert soup.find("mark").text == "wörld"


def test_without_css_header_or_note():
    soup = soup_of(Diagnostic("abc", charset=Charset.ascii()), include_css=False)
    assert soup.find("style") is None
    assert soup.find("h3") is None
    assert soup.find("p") is None
    assert soup.find("pre").get_text() == "0 | abc"


def test_escaping():
    soup = soup_of(Diagnostic("a<b").label(1, 2, "<less>").message("x & y"))
    assert soup.find("mark").text == "<"
    assert soup.find("mark")["data-label"] == "<less>"
    assert soup.find("h3").text == "x & y"
