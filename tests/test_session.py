"""Tests for the per-frame session loop."""

from letterquest import config
from letterquest.entities import Particle, ParticleKind
from letterquest.session import GameSession


def park_player(session, x=-10000, y=-10000):
    """Move the fish (and its target) where no bubble can reach it."""
    session.player.place(x, y)
    session.pointer.move_to(x, y)


class TestTick:
    """Frame counting, spawning and pausing."""

    def test_frame_counter_and_spawn_cadence(self):
        session = GameSession(800, 5000, muted=True)
        park_player(session)

        for _ in range(180):
            session.tick()

        assert session.state.game_frame == 180
        # The first bubble arrives on frame 0
        assert len(session.bubbles) == len(range(0, 180, 60)) == 3

        session.tick()
        assert len(session.bubbles) == 4

    def test_spawn_cadence_after_level_up(self):
        session = GameSession(800, 5000, muted=True)
        park_player(session)
        session.state.letters_collected = 50
        assert session.state.update_level() is True
        assert session.state.bubble_spawn_rate == 50

        for _ in range(200):
            session.tick()

        assert len(session.bubbles) == len(range(0, 200, 50)) == 4

    def test_spawn_cadence_changes_mid_run(self):
        session = GameSession(800, 5000, muted=True)
        park_player(session)

        for _ in range(100):
            session.tick()
        assert len(session.bubbles) == 2  # Frames 0 and 60

        session.state.letters_collected = 50
        session.state.update_level()
        for _ in range(100):
            session.tick()

        # The new rate counts from frame 0, so frames 100 and 150 spawn
        assert session.state.game_frame == 200
        assert len(session.bubbles) == 4

    def test_paused_tick_does_nothing(self, session):
        session.tick()
        frame = session.state.game_frame
        bubbles = [(b.x, b.y) for b in session.bubbles]

        session.toggle_pause()
        for _ in range(10):
            assert session.tick() is False

        assert session.state.game_frame == frame
        assert [(b.x, b.y) for b in session.bubbles] == bubbles

        session.toggle_pause()
        assert session.tick() is True
        assert session.state.game_frame == frame + 1

    def test_draw_order(self, session, recording_surface):
        park_player(session)
        session.particles.append(Particle(400, 300, '#ffffff'))
        session.tick(recording_surface)

        calls = recording_surface.calls
        assert calls[0] == 'fill_background'
        assert calls[-1] == 'fish'
        # Bubbles are drawn before the fish
        assert 'glyph' in calls
        assert calls.index('glyph') < calls.index('fish')

    def test_readout_follows_state(self, session):
        session.state.score = 120
        session.state.collected_word = "OC"
        session.tick()
        assert session.readout.score == 120
        assert session.readout.word_text == "OC"

    def test_offscreen_bubbles_are_pruned(self, session, make_bubble):
        park_player(session)
        session.state.game_frame = 1
        session.bubbles = [make_bubble(100, -50, radius=30), make_bubble(200, 300)]
        session.handle_bubbles()
        assert [b.x for b in session.bubbles] == [200]


class TestCollection:
    """Collecting bubbles."""

    def test_collect_scores_and_bursts(self, session, audio, make_bubble):
        session.state.game_frame = 1  # Not a spawn frame
        session.bubbles = [make_bubble(session.player.x, session.player.y, letter='Q')]

        session.handle_bubbles()

        assert session.bubbles == []
        assert session.state.score == 10
        assert session.state.letters_collected == 1
        assert session.state.collected_word == "Q"
        assert len(session.particles) == config.BURST_PARTICLES
        assert all(p.color == '#4ecdc4' for p in session.particles)
        assert audio.played == ['pop']

    def test_points_scale_with_level(self, session, make_bubble):
        session.state.game_frame = 1
        session.state.level = 3
        session.state.letters_collected = 100
        session.bubbles = [make_bubble(session.player.x, session.player.y)]
        session.handle_bubbles()
        assert session.state.score == 30

    def test_muted_collect_is_silent(self, session, audio, make_bubble):
        session.toggle_mute()
        session.state.game_frame = 1
        session.bubbles = [make_bubble(session.player.x, session.player.y)]
        session.handle_bubbles()
        assert session.state.letters_collected == 1
        assert audio.played == []

    def test_fiftieth_letter_levels_up(self, session, audio, notifications, make_bubble):
        session.state.game_frame = 1
        session.state.letters_collected = 49
        session.bubbles = [make_bubble(session.player.x, session.player.y, letter='Z')]

        session.handle_bubbles()

        assert session.state.letters_collected == 50
        assert session.state.level == 2
        assert session.state.bubble_spawn_rate == 50
        assert session.state.score == 10
        assert "★ LEVEL 2! ★" in [n.text for n in notifications.active]
        assert audio.played == ['pop', 'level_up']

    def test_spelling_a_word(self, session, audio, make_bubble):
        session.state.game_frame = 1
        session.state.collected_word = "FIS"
        session.bubbles = [make_bubble(session.player.x, session.player.y, letter='H')]

        session.handle_bubbles()

        assert session.state.score == 10 + 400
        assert session.state.collected_word == ""
        assert audio.played == ['pop', 'word_bonus']

        # A spelled word adds rising bubbles on top of the burst
        rising = [p for p in session.particles if p.kind == ParticleKind.BUBBLE]
        assert len(session.particles) == 2 * config.BURST_PARTICLES
        assert len(rising) == config.BURST_PARTICLES
        assert all(p.gravity < 0 for p in rising)

    def test_simultaneous_collisions_all_count(self, session, make_bubble):
        session.state.game_frame = 1
        x, y = session.player.x, session.player.y
        far = make_bubble(700, 500, letter='X')
        session.bubbles = [make_bubble(x - 10, y, letter='A'), far, make_bubble(x + 10, y, letter='B')]

        session.handle_bubbles()

        assert session.state.letters_collected == 2
        # Newest bubbles are handled first
        assert session.state.collected_word == "BA"
        assert session.bubbles == [far]


class TestParticles:
    """Particle lifetime inside the session."""

    def test_pruned_after_exactly_fifty_ticks(self, session):
        session.particles = [Particle(400, 300, '#ffffff', decay=0.02)]
        for _ in range(49):
            session.handle_particles()
        assert len(session.particles) == 1
        session.handle_particles()
        assert session.particles == []


class TestControls:
    """Pause, mute, reset, share and resize."""

    def test_toggles(self, session):
        assert session.toggle_pause() is True
        session.resume()
        assert session.state.is_paused is False
        assert session.toggle_mute() is True
        assert session.toggle_mute() is False

    def test_reset_restores_start(self, session):
        fresh = session.state.snapshot()

        session.pointer.move_to(100, 100)
        for _ in range(120):
            session.tick()
        session.state.score = 500
        session.state.collected_word = "OCE"
        session.burst(10, 10, '#ffffff')
        session.toggle_pause()

        session.reset()

        assert session.state.snapshot() == fresh
        assert session.bubbles == []
        assert session.particles == []
        assert (session.player.x, session.player.y) == (400, 300)
        assert (session.player.vx, session.player.vy) == (0, 0)
        assert session.player.trail == []
        assert session.notifications.active == []
        assert session.readout.score == 0

    def test_share_text(self, session, notifications):
        session.state.score = 1234
        text = session.share_text()
        assert "1,234 points" in text
        assert notifications.active[-1].text == text

    def test_resize(self, session):
        session.resize(1000, 700)
        assert (session.width, session.height) == (1000, 700)
        assert (session.state.width, session.state.height) == (1000, 700)
