import unittest

from commitwizard.staging import NothingToCommitError, StagingCoordinator, UserAbortedError


class DummyGitClient:
    def __init__(self, staged=None, status=None, staged_after=None):
        self.staged = list(staged or [])
        self.status = list(status or [])
        self.staged_after = staged_after
        self.stage_all_calls = 0
        self.staged_paths = []

    def get_staged_files(self):
        return list(self.staged)

    def get_status_lines(self):
        return list(self.status)

    def stage_all(self):
        self.stage_all_calls += 1
        self.staged = list(self.staged_after if self.staged_after is not None else ["x"])

    def stage_paths(self, paths):
        self.staged_paths.extend(paths)
        self.staged.extend(paths)

    @property
    def mutations(self):
        return self.stage_all_calls + len(self.staged_paths)


class DummyBackend:
    def __init__(self, confirms=None, selection=None):
        self.confirms = list(confirms or [])
        self.selection = selection or []
        self.confirm_messages = []
        self.checkbox_choices = None

    def confirm(self, message, default=False):
        self.confirm_messages.append((message, default))
        return self.confirms.pop(0)

    def checkbox(self, message, choices):
        self.checkbox_choices = list(choices)
        return list(self.selection)


class TestDefaultMode(unittest.TestCase):
    def test_existing_staged_files_are_kept(self) -> None:
        client = DummyGitClient(staged=["a.py"], status=["M  a.py", " M b.py"])
        backend = DummyBackend()
        staged = StagingCoordinator(client, backend).prepare()
        self.assertEqual(staged, ["a.py"])
        self.assertEqual(client.mutations, 0)
        self.assertEqual(backend.confirm_messages, [])

    def test_nothing_to_commit(self) -> None:
        client = DummyGitClient()
        with self.assertRaises(NothingToCommitError) as ctx:
            StagingCoordinator(client, DummyBackend()).prepare()
        self.assertEqual(str(ctx.exception), "No changes to commit.")
        self.assertEqual(client.mutations, 0)

    def test_stage_all_confirmed(self) -> None:
        client = DummyGitClient(status=[" M a.py", "?? b.py"], staged_after=["a.py", "b.py"])
        backend = DummyBackend(confirms=[True])
        staged = StagingCoordinator(client, backend).prepare()
        self.assertEqual(client.stage_all_calls, 1)
        self.assertEqual(staged, ["a.py", "b.py"])
        self.assertTrue(backend.confirm_messages[0][1])

    def test_stage_all_default_is_configurable(self) -> None:
        client = DummyGitClient(status=[" M a.py"])
        backend = DummyBackend(confirms=[True])
        StagingCoordinator(client, backend, stage_all_default=False).prepare()
        self.assertFalse(backend.confirm_messages[0][1])

    def test_stage_all_declined(self) -> None:
        client = DummyGitClient(status=[" M a.py"])
        with self.assertRaises(UserAbortedError):
            StagingCoordinator(client, DummyBackend(confirms=[False])).prepare()
        self.assertEqual(client.mutations, 0)


class TestPickMode(unittest.TestCase):
    def test_nothing_to_pick(self) -> None:
        with self.assertRaises(NothingToCommitError) as ctx:
            StagingCoordinator(DummyGitClient(), DummyBackend()).prepare(pick=True)
        self.assertEqual(str(ctx.exception), "No changes to pick from.")

    def test_selected_paths_are_staged_individually(self) -> None:
        client = DummyGitClient(status=[" M a.py", "R  old name.txt -> new name.txt", "?? c.py"])
        backend = DummyBackend(selection=["new name.txt", "c.py"])
        staged = StagingCoordinator(client, backend).prepare(pick=True)
        self.assertEqual(
            backend.checkbox_choices,
            [("M a.py", "a.py"), ("R old name.txt -> new name.txt", "new name.txt"), ("?? c.py", "c.py")],
        )
        self.assertEqual(client.staged_paths, ["new name.txt", "c.py"])
        self.assertEqual(client.stage_all_calls, 0)
        self.assertEqual(staged, ["new name.txt", "c.py"])

    def test_no_selection_with_existing_staged_files(self) -> None:
        client = DummyGitClient(staged=["a.py"], status=["M  a.py"])
        backend = DummyBackend(selection=[])
        self.assertEqual(StagingCoordinator(client, backend).prepare(pick=True), ["a.py"])
        self.assertEqual(backend.confirm_messages, [])

    def test_no_selection_declined(self) -> None:
        client = DummyGitClient(status=[" M a.py"])
        backend = DummyBackend(confirms=[False], selection=[])
        with self.assertRaises(UserAbortedError):
            StagingCoordinator(client, backend).prepare(pick=True)
        self.assertEqual(client.mutations, 0)
        self.assertFalse(backend.confirm_messages[0][1])

    def test_no_selection_continue_hits_final_guard(self) -> None:
        client = DummyGitClient(status=[" M a.py"])
        backend = DummyBackend(confirms=[True], selection=[])
        with self.assertRaises(NothingToCommitError) as ctx:
            StagingCoordinator(client, backend).prepare(pick=True)
        self.assertIn("Stage files and try again", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
