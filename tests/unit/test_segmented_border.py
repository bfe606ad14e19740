"""
Unit tests for pageflow/borders/segmented.py - border state machine
"""
from pageflow.borders.geometry import (
    rounded_rect_path,
    rounded_rect_up_path,
    rounded_rect_mid_path,
    rounded_rect_down_path,
)
from pageflow.borders.segmented import BorderState, SegmentedBorder


class TestStateMachine:
    """Test transitions and the pieces drawn for each of them."""

    def test_starts_open(self):
        border = SegmentedBorder(x=10, y=20, w=100)
        assert border.state == BorderState.STARTED
        assert border.is_open

    def test_close_without_break_draws_full_rect(self, doc):
        border = SegmentedBorder(x=10, y=20, w=100, r=4, line_width=1.5)
        border.close(doc, 80)

        strokes = doc.page.strokes()
        assert len(strokes) == 1
        assert strokes[0].commands == rounded_rect_path(10, 20, 100, 60, 4)
        assert strokes[0].line_width == 1.5
        assert border.state == BorderState.CLOSED
        assert not border.is_open

    def test_first_break_draws_top_piece(self, doc):
        border = SegmentedBorder(x=10, y=20, w=100, r=4)
        border.break_segment(doc, 250)
        assert doc.page.strokes()[0].commands == rounded_rect_up_path(10, 20, 100, 230, 4)
        assert border.state == BorderState.BROKEN

    def test_second_break_draws_sides_only(self, doc):
        border = SegmentedBorder(x=10, y=20, w=100, r=4)
        border.break_segment(doc, 250).resume(30)
        border.break_segment(doc, 270)
        assert doc.page.strokes()[1].commands == rounded_rect_mid_path(10, 30, 100, 240, 4)
        assert border.state == BorderState.BROKEN

    def test_close_after_break_draws_bottom_piece(self, doc):
        border = SegmentedBorder(x=10, y=20, w=100, r=4)
        border.break_segment(doc, 250).resume(20)
        border.close(doc, 90)
        assert doc.page.strokes()[1].commands == rounded_rect_down_path(10, 20, 100, 70, 4)
        assert border.state == BorderState.CLOSED

    def test_closed_border_draws_nothing(self, doc):
        border = SegmentedBorder(x=10, y=20, w=100)
        border.close(doc, 40)
        border.break_segment(doc, 60)
        border.close(doc, 80)
        assert len(doc.page.strokes()) == 1

    def test_state_values(self):
        assert int(BorderState.CLOSED) == 0
        assert int(BorderState.STARTED) == 1
        assert int(BorderState.BROKEN) == 2

    def test_document_line_width_is_restored(self, doc):
        doc.line_width(0.5)
        border = SegmentedBorder(x=10, y=20, w=100, line_width=3)
        border.break_segment(doc, 250).resume(20)
        border.close(doc, 60)
        assert all(op.line_width == 3 for op in doc.page.strokes())
        assert doc.current_line_width == 0.5
