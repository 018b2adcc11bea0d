import unittest
from unittest.mock import Mock

import pygame

from game import Game
from game_loop import GameLoop, parse_args, process_events
from input_state import InputMapper


class GameLoopTests(unittest.TestCase):
    def test_tick_updates_then_renders(self):
        calls = []
        loop = GameLoop(lambda: calls.append("update"), lambda: calls.append("render"))
        self.assertFalse(loop.tick())
        loop.start()
        self.assertTrue(loop.tick())
        self.assertEqual(calls, ["update", "render"])
        self.assertEqual(loop.frames, 1)

    def test_stop_halts_scheduling(self):
        update = Mock()
        loop = GameLoop(update, Mock())
        loop.start()
        loop.stop()
        self.assertFalse(loop.tick())
        update.assert_not_called()

    def test_failure_stops_loop_and_propagates(self):
        loop = GameLoop(Mock(side_effect=RuntimeError("boom")), Mock())
        loop.start()
        with self.assertRaises(RuntimeError):
            loop.tick()
        self.assertFalse(loop.running)

    def test_run_until_window_closes(self):
        clock = Mock()
        polls = iter([True, True, False])
        loop = GameLoop(Mock(), Mock(), fps=30, clock=clock)
        loop.run(lambda: next(polls))
        self.assertEqual(loop.frames, 2)
        self.assertFalse(loop.running)
        clock.tick.assert_called_with(30)


class ProcessEventsTests(unittest.TestCase):
    def setUp(self):
        self.game = Game(1280, 720, seed=2)
        self.mapper = InputMapper()
        self.overlay = Mock()

    def send(self, *events):
        return process_events(list(events), self.game, self.mapper, self.overlay)

    def test_toggle_key_starts_and_escape_stops(self):
        self.send(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_d))
        self.assertFalse(self.game.active)
        self.assertFalse(self.mapper.sample().right)

        self.send(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_g))
        self.assertTrue(self.game.active)

        self.send(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_d))
        self.assertTrue(self.mapper.sample().right)

        self.send(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
        self.assertFalse(self.game.active)
        self.assertFalse(self.mapper.sample().right)

    def test_quit_and_clicks(self):
        self.assertTrue(self.send(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(5, 6))))
        self.overlay.handle_click.assert_called_once_with((5, 6))
        self.assertFalse(self.send(pygame.event.Event(pygame.QUIT)))

    def test_resize(self):
        self.send(pygame.event.Event(pygame.VIDEORESIZE, w=900, h=600, size=(900, 600)))
        self.assertEqual((self.game.width, self.game.height), (900, 600))
        self.overlay.layout.assert_called_once_with((900, 600))


class ParseArgsTests(unittest.TestCase):
    def test_defaults_and_overrides(self):
        args = parse_args([])
        self.assertEqual((args.width, args.height, args.fps), (1280, 720, 60))
        args = parse_args(["--seed", "4", "--width", "800", "--log", "--start"])
        self.assertEqual(args.seed, 4)
        self.assertEqual(args.width, 800)
        self.assertTrue(args.log and args.start)
        self.assertIsNone(parse_args([]).panels)
        self.assertEqual(parse_args(["--panels", "mine.json"]).panels, "mine.json")


if __name__ == "__main__":
    unittest.main()
