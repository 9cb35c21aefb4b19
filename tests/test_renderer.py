from csv2table.models import HtmlTableOptions
from csv2table.renderer import escape_html, render_html_table


def test_empty_table_renders_nothing() -> None:
    assert render_html_table([]) is None


def test_header_row_goes_to_thead() -> None:
    html = render_html_table([["name", "age"], ["Alice", "30"]])

    assert html == (
        '<table class="csv-table">'
        "<thead><tr><th>name</th><th>age</th></tr></thead>"
        "<tbody><tr><td>Alice</td><td>30</td></tr></tbody>"
        "</table>"
    )


def test_without_header_every_row_is_body() -> None:
    html = render_html_table([["a"], ["b"]], HtmlTableOptions(has_header=False, class_name="data"))

    assert html == '<table class="data"><tbody><tr><td>a</td></tr><tr><td>b</td></tr></tbody></table>'


def test_header_only_table_keeps_empty_tbody() -> None:
    html = render_html_table([["only"]])

    assert html == '<table class="csv-table"><thead><tr><th>only</th></tr></thead><tbody></tbody></table>'


def test_ragged_rows_are_not_padded() -> None:
    html = render_html_table([["a", "b", "c"], ["x"]], HtmlTableOptions(has_header=False))

    assert "<tr><td>a</td><td>b</td><td>c</td></tr><tr><td>x</td></tr>" in html


def test_cells_are_escaped() -> None:
    html = render_html_table([["<b>&</b>", 'say "hi"']], HtmlTableOptions(has_header=False))

    assert "<td>&lt;b&gt;&amp;&lt;/b&gt;</td>" in html
    assert '<td>say "hi"</td>' in html


def test_class_name_is_escaped() -> None:
    html = render_html_table([["a"]], HtmlTableOptions(class_name='x" onclick="y'))

    assert html.startswith('<table class="x&quot; onclick=&quot;y">')


def test_escape_html() -> None:
    assert escape_html("a < b && c > d") == "a &lt; b &amp;&amp; c &gt; d"
