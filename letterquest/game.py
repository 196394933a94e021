#!/usr/bin/env python3
"""
Ocean Letter Quest - Terminal Edition
Steer the fish into rising letter bubbles and spell ocean words for bonuses.

Controls:
  Mouse / Arrow keys - Move the target the fish swims toward
  Space - Pause/Resume
  M - Mute/Unmute
  Ctrl+R - Restart
  S - Share score
  Q / ESC - Quit
"""

import argparse
import curses
import logging
import sys
import time
from typing import Optional

from letterquest import config
from letterquest.controls import KeySteering
from letterquest.hud import NotificationBoard, Readout
from letterquest.logging_config import setup_logging
from letterquest.session import GameSession
from letterquest.synth import SoundBoard
from letterquest.terminal import (
    COLOR_BG, HUD_BONUS, HUD_BORDER, HUD_INFO, HUD_LEVEL, HUD_TEXT, HUD_TITLE,
    TerminalSurface,
)

logger = logging.getLogger(__name__)

CTRL_R = 18
ESC = 27

# xterm escape sequences for reporting mouse motion without a button held
MOUSE_MOTION_ON = "\033[?1003h"
MOUSE_MOTION_OFF = "\033[?1003l"


class Game:
    """Terminal host: input, the frame loop and the HUD around a GameSession"""

    def __init__(self, stdscr, fps: int = config.FPS, muted: bool = config.START_MUTED):
        self.stdscr = stdscr
        self.height, self.width = stdscr.getmaxyx()
        self.fps = fps

        # Create a pad for double buffering (eliminates flicker)
        self.pad = curses.newpad(self.height, self.width)

        self.showing_dialog = False  # Suppress the pause box while a dialog is up
        self.quit_requested = False
        self.shared_text: Optional[str] = None

        self.sounds = SoundBoard.open()
        self.notifications = NotificationBoard(fps)
        self.readout = Readout()
        self.session = GameSession(
            self.width * config.CELL_WIDTH,
            self.height * config.CELL_HEIGHT,
            notifications=self.notifications,
            audio=self.sounds,
            readout=self.readout,
            muted=muted,
        )

        self.steering = KeySteering()
        self.steering.start()

        # Setup curses
        curses.curs_set(0)
        stdscr.nodelay(1)
        stdscr.timeout(0)
        stdscr.keypad(True)
        curses.mousemask(curses.ALL_MOUSE_EVENTS | curses.REPORT_MOUSE_POSITION)
        curses.mouseinterval(0)
        sys.stdout.write(MOUSE_MOTION_ON)
        sys.stdout.flush()

        self._init_colors()
        self.surface = TerminalSurface(self.pad, self.height, self.width)

        logger.info("Game started on a %dx%d terminal at %d FPS", self.width, self.height, fps)

    def _init_colors(self):
        curses.start_color()
        if curses.COLORS >= 256:
            curses.init_pair(HUD_TEXT, 231, COLOR_BG)      # White status bar
            curses.init_pair(HUD_LEVEL, 236, 220)          # Dark on gold
            curses.init_pair(HUD_BONUS, 231, 35)           # White on green
            curses.init_pair(HUD_BORDER, 179, COLOR_BG)    # Muted amber
            curses.init_pair(HUD_TITLE, 173, COLOR_BG)     # Dusty orange
            curses.init_pair(HUD_INFO, 116, COLOR_BG)      # Pale cyan
        else:
            curses.init_pair(HUD_TEXT, curses.COLOR_WHITE, curses.COLOR_BLUE)
            curses.init_pair(HUD_LEVEL, curses.COLOR_BLACK, curses.COLOR_YELLOW)
            curses.init_pair(HUD_BONUS, curses.COLOR_WHITE, curses.COLOR_GREEN)
            curses.init_pair(HUD_BORDER, curses.COLOR_YELLOW, curses.COLOR_BLUE)
            curses.init_pair(HUD_TITLE, curses.COLOR_RED, curses.COLOR_BLUE)
            curses.init_pair(HUD_INFO, curses.COLOR_CYAN, curses.COLOR_BLUE)
        self.stdscr.bkgd(' ', curses.color_pair(HUD_TEXT))

    def _cell_to_world(self, col: int, row: int):
        return (col + 0.5) * config.CELL_WIDTH, (row + 0.5) * config.CELL_HEIGHT

    def _resize(self):
        self.height, self.width = self.stdscr.getmaxyx()
        self.pad = curses.newpad(self.height, self.width)
        self.surface.resize(self.pad, self.height, self.width)
        self.session.resize(self.width * config.CELL_WIDTH, self.height * config.CELL_HEIGHT)
        self.stdscr.clear()
        logger.debug("Resized to %dx%d", self.width, self.height)

    def _handle_mouse(self):
        try:
            _, col, row, _, bstate = curses.getmouse()
        except curses.error:
            return
        x, y = self._cell_to_world(col, row)
        pointer = self.session.pointer
        if bstate & curses.BUTTON1_PRESSED:
            pointer.press(x, y)
        else:
            if bstate & curses.BUTTON1_RELEASED:
                pointer.release()
            pointer.move_to(x, y)

    def handle_input(self):
        """Drain pending curses input, then apply held arrow keys"""
        while True:
            key = self.stdscr.getch()
            if key == -1:  # No more input
                break

            if key == curses.KEY_MOUSE:
                self._handle_mouse()
            elif key == curses.KEY_RESIZE:
                self._resize()
            elif key == ord(' '):
                self.session.toggle_pause()
            elif key in (ord('m'), ord('M')):
                muted = self.session.toggle_mute()
                self.notifications.message("Muted" if muted else "Sound on", 1.5)
            elif key == CTRL_R:
                if self._show_confirmation_dialog("RESTART GAME?", "Are you sure you want to restart?"):
                    self.session.reset()
            elif key in (ord('s'), ord('S')):
                self.shared_text = self.session.share_text()
            elif key in (ord('q'), ord('Q'), ESC):
                if self._show_confirmation_dialog("LEAVE THE OCEAN?", "Are you sure you want to quit?"):
                    self.quit_requested = True

        if not self.session.state.is_paused:
            self.steering.steer(self.session.pointer, self.session.width, self.session.height)

    def _show_confirmation_dialog(self, title: str, message: str) -> bool:
        """Show a Yes/No confirmation dialog. Returns True if Yes, False if No."""
        saved_paused = self.session.state.is_paused
        self.session.state.is_paused = True  # Freeze the game while asking
        self.showing_dialog = True

        dialog_width = max(len(title), len(message), 20) + 4
        dialog_height = 6
        y_start = (self.height - dialog_height) // 2
        x_start = (self.width - dialog_width) // 2

        self.draw()

        border = curses.color_pair(HUD_BORDER)
        try:
            for i in range(dialog_height):
                if i == 0:
                    line = "╔" + "═" * (dialog_width - 2) + "╗"
                elif i == dialog_height - 1:
                    line = "╚" + "═" * (dialog_width - 2) + "╝"
                else:
                    line = "║" + " " * (dialog_width - 2) + "║"
                self.stdscr.addstr(y_start + i, x_start, line, border)

            self.stdscr.addstr(y_start + 1, x_start + (dialog_width - len(title)) // 2, title,
                               curses.color_pair(HUD_TITLE) | curses.A_BOLD)
            self.stdscr.addstr(y_start + 2, x_start + (dialog_width - len(message)) // 2, message,
                               curses.color_pair(HUD_TEXT))
            options = "[Y] Yes    [N] No"
            self.stdscr.addstr(y_start + 4, x_start + (dialog_width - len(options)) // 2, options, border)
            self.stdscr.refresh()
        except curses.error:
            pass  # Terminal too narrow for the box; the keys still work

        # Block until answered
        self.stdscr.nodelay(0)
        while True:
            key = self.stdscr.getch()
            if key in (ord('y'), ord('Y')):
                result = True
                break
            if key in (ord('n'), ord('N'), ESC):
                result = False
                break
        self.stdscr.nodelay(1)

        self.showing_dialog = False
        self.session.state.is_paused = saved_paused
        self.steering.release_all()
        return result

    def _draw_centered(self, row: int, text: str, attr: int):
        col = max(0, (self.width - len(text)) // 2)
        if 0 <= row < self.height:
            try:
                self.pad.addstr(row, col, text[:self.width - col - 1], attr)
            except curses.error:
                pass

    def _draw_hud(self):
        status = self.readout.status_line()
        if self.session.state.is_muted:
            status += "   [MUTED]"
        try:
            self.pad.addstr(0, 0, status.ljust(self.width)[:self.width - 1],
                            curses.color_pair(HUD_TEXT) | curses.A_BOLD)
        except curses.error:
            pass

        rows = {'level': self.height // 2, 'bonus': self.height // 4, 'info': self.height - 2}
        for notification in self.notifications.active:
            text = f"  {notification.text}  "
            if notification.style == 'level':
                attr = curses.color_pair(HUD_LEVEL) | curses.A_BOLD
            elif notification.style == 'bonus':
                attr = curses.color_pair(HUD_BONUS) | curses.A_BOLD
            else:
                attr = curses.color_pair(HUD_INFO)
                # Scroll messages too long for the screen
                if len(text) > self.width - 2:
                    start = notification.scroll_offset % len(text)
                    text = (text + text)[start:start + self.width - 2]
            self._draw_centered(rows[notification.style], text, attr)

    def _draw_pause_box(self):
        pause_text = [
            "╔═══════════════════════════╗",
            "║                           ║",
            "║          PAUSED           ║",
            "║                           ║",
            "║   Press SPACE to Resume   ║",
            "║                           ║",
            "╚═══════════════════════════╝"
        ]
        start_y = max(1, (self.height - len(pause_text)) // 2)
        for i, line in enumerate(pause_text):
            self._draw_centered(start_y + i, line, curses.color_pair(HUD_BORDER) | curses.A_BOLD)

    def draw(self):
        """Run one tick onto the pad, add the HUD and show it"""
        self.session.tick(self.surface)
        self._draw_hud()

        if self.session.state.is_paused and not self.showing_dialog:
            self._draw_pause_box()

        # Refresh the pad to the screen in one step
        try:
            self.pad.noutrefresh(0, 0, 0, 0, self.height - 1, self.width - 1)
            curses.doupdate()
        except curses.error:
            # Terminal size changed - just skip this frame
            pass

    def run(self):
        """Main game loop"""
        frame_time = 1.0 / self.fps

        while not self.quit_requested:
            start_time = time.time()

            self.handle_input()
            self.draw()

            # Maintain frame rate
            elapsed = time.time() - start_time
            sleep_time = frame_time - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)

        logger.info("Quit with score %d at level %d",
                    self.session.state.score, self.session.state.level)

    def close(self):
        self.steering.stop()
        self.sounds.close()
        sys.stdout.write(MOUSE_MOTION_OFF)
        sys.stdout.flush()


def main(stdscr, args) -> Optional[str]:
    """Entry point for curses wrapper. Returns the last shared score line."""
    stdscr.clear()
    stdscr.refresh()

    height, width = stdscr.getmaxyx()
    if height < config.MIN_ROWS or width < config.MIN_COLUMNS:
        curses.endwin()
        print(f"Error: Terminal size must be at least {config.MIN_COLUMNS}x{config.MIN_ROWS}.")
        print(f"Current size: {width}x{height}")
        print("Please resize your terminal and try again.")
        sys.exit(1)

    game = Game(stdscr, fps=args.fps, muted=args.mute)
    try:
        game.run()
    finally:
        game.close()
    return game.shared_text


def cli(argv=None):
    parser = argparse.ArgumentParser(
        prog="letterquest",
        description="Ocean Letter Quest: collect letter bubbles and spell ocean words.")
    parser.add_argument("--fps", type=int, default=config.FPS, help="frames per second (default: %(default)s)")
    parser.add_argument("--mute", action="store_true", default=config.START_MUTED, help="start with sound off")
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="log level (default: %(default)s)")
    args = parser.parse_args(argv)

    if args.fps <= 0:
        parser.error("--fps must be positive")

    setup_logging(level=args.log_level)
    shared = curses.wrapper(main, args)
    if shared:
        print(shared)


if __name__ == "__main__":
    cli()
