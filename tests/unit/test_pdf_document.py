"""
Unit tests for pageflow/document/pdf_document.py - the host document engine
"""
import io

import pytest
from reportlab.lib import colors

from pageflow.document import PDFDocument, PageBufferError, TextMetrics, to_color
from pageflow.document.events import PageEvent


class TestDocumentSetup:
    """Test construction, page geometry and cursor defaults."""

    def test_first_page_created(self, doc):
        assert len(doc.pages) == 1
        assert doc.page.number == 1
        assert (doc.x, doc.y) == (20, 20)

    def test_useful_dimensions(self, doc):
        assert doc.useful_w == 360
        assert doc.useful_h == 260
        assert doc.page.max_y() == 280

    def test_named_page_size(self, a4_doc):
        assert a4_doc.page.width == pytest.approx(595.27, abs=0.01)
        assert a4_doc.page.margins.left == 72

    def test_unknown_page_size_raises(self, test_settings):
        with pytest.raises(ValueError):
            PDFDocument(page_size="postcard", settings=test_settings)

    def test_margin_dict(self, test_settings):
        doc = PDFDocument(page_size=(400, 300), margins={"top": 30, "left": 10}, settings=test_settings)
        assert doc.page.margins.top == 30
        assert doc.page.margins.left == 10
        assert doc.page.margins.bottom == 72


class TestCursor:
    """Test positioning helpers."""

    def test_helpers_chain_and_move(self, doc):
        result = doc.set_xy(100, 50).inc_x(10).inc_y(5).inc_xy(1, 2)
        assert result is doc
        assert (doc.x, doc.y) == (111, 57)

    def test_set_x_and_set_y(self, doc):
        doc.set_x(33).set_y(44)
        assert (doc.x, doc.y) == (33, 44)

    def test_start_x_returns_to_margin(self, doc):
        doc.set_x(200).start_x()
        assert doc.x == 20


class TestPaths:
    """Test path recording and graphics state."""

    def test_stroke_records_path_with_line_width(self, doc):
        doc.move_to(0, 0).line_to(10, 10).line_width(2).stroke()
        strokes = doc.page.strokes()
        assert len(strokes) == 1
        assert strokes[0].commands == [("M", 0, 0), ("L", 10, 10)]
        assert strokes[0].line_width == 2

    def test_stroke_without_path_records_nothing(self, doc):
        doc.stroke()
        assert doc.page.strokes() == []

    def test_fill_records_fill_op(self, doc):
        doc.rect(0, 0, 10, 10).fill("red")
        assert len(doc.page.operations) == 1
        assert doc.page.operations[0].color.rgb() == colors.red.rgb()

    def test_rounded_rect_pieces_are_recorded(self, doc):
        doc.rounded_rect_up(0, 0, 100, 50, 5).stroke()
        doc.rounded_rect_mid(0, 0, 100, 50, 5).stroke()
        doc.rounded_rect_down(0, 0, 100, 50, 5).stroke()
        assert len(doc.page.strokes()) == 3


class TestColors:
    def test_named_color(self):
        assert to_color("blue").rgb() == colors.blue.rgb()

    def test_unknown_color_falls_back_to_black(self):
        assert to_color("not-a-colour").rgb() == colors.black.rgb()

    def test_rgb_tuple(self):
        assert to_color((255, 0, 0)).rgb() == (1, 0, 0)


class TestText:
    """Test wrapping, measurement and automatic page breaks."""

    def test_text_advances_cursor_by_measured_height(self, doc):
        text = "A fairly long sentence that must wrap inside one hundred points."
        expected = doc.height_of_string(text, width=100)
        doc.text(text, 20, 40, width=100)
        assert doc.y == pytest.approx(40 + expected)
        assert len(doc.page.texts()) == len(TextMetrics.wrap(text, "Helvetica", 12, 100))

    def test_empty_text_has_no_height(self, doc):
        assert doc.height_of_string("", width=100) == 0
        assert doc.height_of_string(None, width=100) == 0

    def test_height_limit_drops_lines(self, doc):
        line_h = doc.current_line_height()
        doc.text("one two three four five six seven eight nine ten", 20, 20, width=30, height=line_h * 2)
        assert len(doc.page.texts()) == 2

    def test_text_uses_fill_color(self, doc):
        doc.fill_color("green").text("hello")
        assert doc.page.texts()[0].color.rgb() == colors.green.rgb()

    def test_link_adds_annotation_and_underline(self, doc):
        doc.text("docs", link="https://example.com", underline=True)
        assert doc.page.links()[0].url == "https://example.com"
        assert len(doc.page.strokes()) == 1

    def test_automatic_page_break(self, doc, long_text):
        doc.text(long_text)
        assert len(doc.pages) > 1
        first_on_second_page = doc.pages[1].texts()[0]
        assert first_on_second_page.y == 20
        for page in doc.pages:
            for op in page.texts():
                assert op.y + doc.current_line_height() <= page.max_y() + 1e-6

    def test_suppressed_page_break_overflows(self, doc, long_text):
        doc.no_page_break = True
        doc.text(long_text)
        assert len(doc.pages) == 1
        assert doc.y > doc.page.max_y()

    def test_font_selection(self, doc):
        doc.font("Courier", 9).text("mono")
        op = doc.page.texts()[0]
        assert (op.font, op.size) == ("Courier", 9)


class TestPageBreakSuppression:
    """Test the scoped suppression flag."""

    def test_restores_previous_value(self, doc):
        with doc.page_break_suppressed():
            assert doc.no_page_break is True
        assert doc.no_page_break is False

    def test_nested_scopes_compose(self, doc):
        with doc.page_break_suppressed():
            with doc.page_break_suppressed():
                pass
            assert doc.no_page_break is True
        assert doc.no_page_break is False

    def test_restored_on_exception(self, doc):
        with pytest.raises(RuntimeError):
            with doc.page_break_suppressed():
                raise RuntimeError("boom")
        assert doc.no_page_break is False


class TestPages:
    """Test add_page, events and buffering."""

    def test_add_page_resets_cursor(self, doc):
        doc.set_xy(200, 200).add_page()
        assert (doc.x, doc.y) == (20, 20)
        assert doc.page.number == 2

    def test_add_page_emits_before_then_after(self, doc):
        seen = []
        doc.on_before_page_break(lambda: seen.append(("before", doc.page_index, doc.y)))
        doc.on_after_page_break(lambda: seen.append(("after", doc.page_index, doc.y)))
        doc.set_y(250).add_page()
        assert seen == [("before", 0, 250), ("after", 1, 20)]

    def test_try_add_page(self, doc):
        doc.set_y(200).try_add_page(50)
        assert len(doc.pages) == 1
        doc.set_y(250).try_add_page(50)
        assert len(doc.pages) == 2

    def test_unbuffered_pages_flush_on_add(self, doc):
        doc.add_page()
        assert doc.pages[0].flushed is True
        assert doc.buffered_page_range().start == 1
        with pytest.raises(PageBufferError):
            doc.switch_to_page(0)

    def test_buffered_switch_to_page(self, buffered_doc):
        buffered_doc.add_page().add_page()
        assert buffered_doc.buffered_page_range().count == 3
        buffered_doc.switch_to_page(0).text("back on page one")
        assert buffered_doc.pages[0].find_text("back on page one") is not None

    def test_switch_out_of_range(self, buffered_doc):
        with pytest.raises(PageBufferError):
            buffered_doc.switch_to_page(5)

    def test_drawing_on_flushed_page_raises(self, buffered_doc):
        buffered_doc.flush_pages()
        with pytest.raises(PageBufferError):
            buffered_doc.text("too late")

    def test_subscription_dispose(self, doc):
        calls = []
        subscription = doc.on_before_page_break(lambda: calls.append(1))
        doc.add_page()
        subscription.dispose()
        doc.add_page()
        assert calls == [1]
        assert doc.events.count(PageEvent.BEFORE_PAGE_BREAK) == 0


class TestOutput:
    """Test saving through reportlab."""

    def test_end_writes_pdf(self, doc):
        doc.text("hello").add_page().text("world")
        output = doc.end()
        assert isinstance(output, io.BytesIO)
        assert output.getvalue().startswith(b"%PDF")

    def test_end_twice_raises(self, doc):
        doc.end()
        with pytest.raises(ValueError):
            doc.end()

    def test_page_count_in_file(self, tmp_path, test_settings):
        from pypdf import PdfReader

        path = tmp_path / "pages.pdf"
        doc = PDFDocument(str(path), page_size=(400, 300), margins=20, settings=test_settings)
        doc.info["Title"] = "Three pages"
        doc.add_page().add_page().end()

        reader = PdfReader(str(path))
        assert len(reader.pages) == 3
        assert reader.metadata.title == "Three pages"


class TestDecorations:
    """Test ruler and page number footer."""

    def test_ruler_preserves_cursor_and_flag(self, doc):
        doc.set_xy(123, 45)
        doc.draw_ruler(0, 0)
        assert (doc.x, doc.y) == (123, 45)
        assert doc.no_page_break is False
        assert doc.page.find_text("50") is not None
        assert len(doc.pages) == 1

    def test_stamp_page_numbers(self, buffered_doc):
        buffered_doc.add_page().add_page()
        buffered_doc.stamp_page_numbers()
        for index, page in enumerate(buffered_doc.pages):
            assert page.find_text(f"Page {index + 1} of 3") is not None
            assert page.flushed is True
