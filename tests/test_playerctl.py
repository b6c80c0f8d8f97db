import subprocess
import unittest
from unittest import mock

from multiplayerctl.backend import build_player_service
from multiplayerctl.common import Action, ExternalServiceError
from multiplayerctl.playerctl import PlayerctlService


def completed(args, returncode=0, stdout="", stderr=""):
    return subprocess.CompletedProcess(args, returncode, stdout=stdout, stderr=stderr)


class PlayerctlServiceTests(unittest.TestCase):
    def setUp(self):
        self.service = PlayerctlService("/usr/bin/playerctl")
        patcher = mock.patch("multiplayerctl.playerctl.subprocess.run")
        self.run = patcher.start()
        self.addCleanup(patcher.stop)

    def test_list_players_keeps_order(self):
        self.run.return_value = completed(
            ["/usr/bin/playerctl", "--list-all"],
            stdout="spotify\nfirefox.instance_1_42\n\nmpv\n",
        )

        players = self.service.list_players()

        self.assertEqual(players, ("spotify", "firefox.instance_1_42", "mpv"))
        self.run.assert_called_once_with(
            ["/usr/bin/playerctl", "--list-all"],
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )

    def test_output_is_decoded_leniently(self):
        self.run.return_value = completed([], stdout="caf\ufffd\n")

        self.assertEqual(self.service.list_players(), ("caf\ufffd",))
        kwargs = self.run.call_args.kwargs
        self.assertEqual(kwargs["encoding"], "utf-8")
        self.assertEqual(kwargs["errors"], "replace")

    def test_list_players_treats_no_players_as_empty(self):
        self.run.return_value = completed(
            ["/usr/bin/playerctl", "--list-all"], returncode=1, stderr="No players found\n"
        )

        self.assertEqual(self.service.list_players(), ())

    def test_list_players_raises_on_other_failures(self):
        self.run.return_value = completed(
            ["/usr/bin/playerctl", "--list-all"], returncode=1, stderr="Could not connect to bus\n"
        )

        with self.assertRaises(ExternalServiceError) as ctx:
            self.service.list_players()
        self.assertEqual(ctx.exception.returncode, 1)
        self.assertIn("Could not connect to bus", str(ctx.exception))

    def test_command_targets_named_player(self):
        self.run.return_value = completed([], stdout="Paused\n")

        out = self.service.command("spotify", Action.STATUS)

        self.assertEqual(out, "Paused\n")
        self.assertEqual(self.run.call_args.args[0], ["/usr/bin/playerctl", "--player=spotify", "status"])

    def test_command_without_target_uses_current_player(self):
        self.run.return_value = completed([])

        self.service.command(None, Action.TOGGLE)

        self.assertEqual(self.run.call_args.args[0], ["/usr/bin/playerctl", "play-pause"])

    def test_command_failure_raises(self):
        self.run.return_value = completed([], returncode=1, stderr="No players found\n")

        with self.assertRaises(ExternalServiceError) as ctx:
            self.service.command(None, Action.PLAY)
        self.assertEqual(ctx.exception.stderr, "No players found")

    def test_missing_binary_raises(self):
        self.run.side_effect = FileNotFoundError(2, "No such file or directory")

        with self.assertRaises(ExternalServiceError):
            self.service.list_players()

    def test_query_passes_arguments_through(self):
        self.run.return_value = completed([], stdout="0.500000\n")

        out = self.service.query("volume", "0.5", "--format={{volume}}")

        self.assertEqual(out, "0.500000\n")
        self.assertEqual(
            self.run.call_args.args[0],
            ["/usr/bin/playerctl", "volume", "0.5", "--format={{volume}}"],
        )


class BuildPlayerServiceTests(unittest.TestCase):
    @mock.patch("multiplayerctl.backend.sys.platform", "linux")
    @mock.patch("multiplayerctl.backend.shutil.which", return_value="/usr/bin/playerctl")
    def test_resolves_playerctl_on_path(self, which):
        service = build_player_service()

        self.assertEqual(service.executable, "/usr/bin/playerctl")
        which.assert_called_once_with("playerctl")

    @mock.patch("multiplayerctl.backend.sys.platform", "linux")
    @mock.patch("multiplayerctl.backend.shutil.which", return_value="/opt/bin/playerctl")
    def test_honours_explicit_executable(self, which):
        build_player_service("/opt/bin/playerctl")

        which.assert_called_once_with("/opt/bin/playerctl")

    @mock.patch("multiplayerctl.backend.sys.platform", "linux")
    @mock.patch("multiplayerctl.backend.shutil.which", return_value=None)
    def test_missing_playerctl_raises(self, _which):
        with self.assertRaises(ExternalServiceError) as ctx:
            build_player_service()
        self.assertIn("not found", str(ctx.exception))

    @mock.patch("multiplayerctl.backend.sys.platform", "win32")
    def test_windows_is_unsupported(self):
        with self.assertRaises(ExternalServiceError):
            build_player_service()


if __name__ == "__main__":
    unittest.main()
