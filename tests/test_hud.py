"""Tests for notifications, the readout and the pointer."""

from letterquest import config
from letterquest.hud import EMPTY_WORD_HINT, NotificationBoard, Readout
from letterquest.pointer import PointerInput


class TestNotificationBoard:
    """Timed banners."""

    def test_lifetimes(self):
        board = NotificationBoard(fps=60)
        board.level_up(4)
        board.word_bonus("CORAL", 500)
        assert [(n.text, n.timer, n.style) for n in board.active] == [
            ("★ LEVEL 4! ★", 180, 'level'),
            ("✦ CORAL +500! ✦", 240, 'bonus'),
        ]

    def test_expiry(self):
        board = NotificationBoard(fps=10)
        board.level_up(2)
        for frame in range(29):
            board.tick(frame)
        assert len(board.active) == 1
        board.tick(29)
        assert board.active == []

    def test_scrolls_every_other_frame(self):
        board = NotificationBoard(fps=60)
        board.message("hello", seconds=1)
        for frame in range(10):
            board.tick(frame)
        assert board.active[0].scroll_offset == 5

    def test_clear(self):
        board = NotificationBoard()
        board.message("hi")
        board.clear()
        assert board.active == []


class TestReadout:
    """Status bar values."""

    def test_hint_when_no_letters(self):
        readout = Readout()
        assert readout.word_text == EMPTY_WORD_HINT

    def test_status_line(self):
        readout = Readout()
        readout.update(12345, 67, 2, "SWI")
        line = readout.status_line()
        assert "SCORE 12,345" in line
        assert "LETTERS 67" in line
        assert "LEVEL 2" in line
        assert "WORD SWI" in line


class TestPointer:
    """Pointer target and its trail."""

    def test_trail_is_bounded(self):
        pointer = PointerInput(0, 0)
        for i in range(40):
            pointer.move_to(i, i)
        assert len(pointer.trail) == config.POINTER_TRAIL_LENGTH
        assert pointer.trail[-1].x == 39

    def test_nudge_stays_in_field(self):
        pointer = PointerInput(10, 590)
        pointer.nudge(-50, 50, 800, 600)
        assert (pointer.x, pointer.y) == (0, 600)

    def test_press_and_release(self):
        pointer = PointerInput(0, 0)
        pointer.press(30, 40)
        assert pointer.pressed is True
        assert (pointer.x, pointer.y) == (30, 40)
        pointer.release()
        assert pointer.pressed is False

    def test_render_skips_oldest_point(self, recording_surface):
        pointer = PointerInput(0, 0)
        pointer.move_to(1, 1)
        pointer.move_to(2, 2)
        pointer.render(recording_surface)
        assert recording_surface.calls == ['disc']
