"""Unit tests for fslink.api.link.LinkStore module."""

import json
import os

import pytest

from fslink.api.link.errors import (
    DatabaseCorruptError,
    DatabaseWriteError,
    DuplicateTargetError,
    EntryNotFoundError,
    ProjectNotFoundError,
    SourceNotFoundError,
    TargetExistsError,
    UnsupportedLinkKindError,
)
from fslink.api.link.LinkKind import LinkKind
from fslink.api.link.LinkStore import LinkStore
from tests.unit.conftest import read_db

pytestmark = pytest.mark.link


class TestOpenAndInit:
    def test_open_from_subdirectory(self, project):
        sub = project / "a" / "b"
        sub.mkdir(parents=True)
        store = LinkStore.open(sub)
        assert store.project_root == project.resolve()
        assert store.db_path == project.resolve() / ".fslink" / "links"

    def test_open_without_project(self, tmp_path):
        with pytest.raises(ProjectNotFoundError):
            LinkStore.open(tmp_path / "fslink_home")

    def test_init_is_idempotent(self, tmp_path):
        root = tmp_path / "fresh"
        root.mkdir()
        LinkStore.init(root)
        store = LinkStore.init(root)
        assert store.db_dir.is_dir()
        assert store.list() == []


class TestCreate:
    def test_creates_disabled_entry(self, store, source_file, project):
        entry = store.create(source_file, project / "mod" / "src.conf")

        assert entry.id == 0
        assert entry.enabled is False
        assert entry.kind is LinkKind.SOFT
        assert not os.path.lexists(project / "mod" / "src.conf")

        records = read_db(project)
        assert records == [
            {
                "id": 0,
                "source_path": str(source_file),
                "target_path": str(project / "mod" / "src.conf"),
                "kind": "soft",
                "enabled": False,
            }
        ]

    def test_ids_increase(self, store, source_file, project):
        first = store.create(source_file, project / "one.conf")
        second = store.create(source_file, project / "two.conf", LinkKind.HARD)
        assert (first.id, second.id) == (0, 1)
        assert [entry.id for entry in store.list()] == [0, 1]

    def test_ids_are_not_renumbered_after_remove(self, store, source_file, project):
        store.create(source_file, project / "one.conf")
        store.create(source_file, project / "two.conf")
        store.remove(0)
        third = store.create(source_file, project / "three.conf")
        assert [entry.id for entry in store.list()] == [1, 2]
        assert third.id == 2

    def test_duplicate_target(self, store, source_file, project):
        store.create(source_file, project / "src.conf")
        with pytest.raises(DuplicateTargetError):
            store.create(source_file, project / "src.conf", LinkKind.HARD)
        assert len(store.list()) == 1

    def test_missing_source(self, store, tmp_path, project):
        with pytest.raises(SourceNotFoundError):
            store.create(tmp_path / "nope.conf", project / "nope.conf")
        assert read_db(project) == []

    def test_hard_link_to_directory(self, store, source_dir, project):
        with pytest.raises(UnsupportedLinkKindError):
            store.create(source_dir, project / "assets", LinkKind.HARD)

    def test_occupied_target(self, store, source_file, project):
        (project / "src.conf").write_text("local")
        with pytest.raises(TargetExistsError):
            store.create(source_file, project / "src.conf")
        assert read_db(project) == []

    def test_adopts_existing_link(self, store, source_file, project):
        (project / "src.conf").symlink_to(source_file)
        entry = store.create(source_file, project / "src.conf")
        assert entry.enabled is True

    def test_enable_creates_link(self, store, source_file, project):
        entry = store.create(source_file, project / "src.conf", enable=True)
        assert entry.enabled is True
        assert (project / "src.conf").is_symlink()
        assert read_db(project)[0]["enabled"] is True

    def test_target_equal_to_source_is_rejected(self, store, source_file, project):
        with pytest.raises(TargetExistsError):
            store.create(source_file, source_file, LinkKind.HARD)
        assert read_db(project) == []
        assert source_file.read_text() == "key = value\n"

    def test_target_reaching_source_through_symlinked_parent_is_rejected(self, store, source_file, project, tmp_path):
        alias = tmp_path / "alias"
        alias.symlink_to(source_file.parent, target_is_directory=True)
        with pytest.raises(TargetExistsError):
            store.create(source_file, alias / "src.conf", LinkKind.HARD)
        assert read_db(project) == []
        assert source_file.exists()

    def test_adopts_symlink_through_symlinked_parent(self, store, source_file, project, tmp_path):
        alias = tmp_path / "alias"
        alias.symlink_to(source_file.parent, target_is_directory=True)
        (project / "src.conf").symlink_to(alias / "src.conf")
        entry = store.create(source_file, project / "src.conf")
        assert entry.enabled is True


class TestToggle:
    def test_toggle_enables_and_creates_symlink(self, store, source_file, project):
        store.create(source_file, project / "mod" / "src.conf")
        entry = store.toggle(0)

        assert entry.enabled is True
        assert (project / "mod" / "src.conf").is_symlink()
        assert read_db(project)[0]["enabled"] is True

    def test_toggle_twice_restores_state(self, store, source_file, project):
        store.create(source_file, project / "src.conf")
        before = read_db(project)

        store.toggle(0)
        store.toggle(0)

        assert read_db(project) == before
        assert not os.path.lexists(project / "src.conf")

    def test_toggle_by_target_path(self, store, source_file, project):
        store.create(source_file, project / "src.conf", LinkKind.HARD)
        entry = store.toggle(str(project / "src.conf"))
        assert entry.enabled is True
        assert os.path.samefile(source_file, project / "src.conf")

    def test_failed_enable_leaves_database_unchanged(self, store, source_file, project):
        store.create(source_file, project / "src.conf")
        before = store.db_path.read_text()
        (project / "src.conf").write_text("appeared later")

        with pytest.raises(TargetExistsError):
            store.toggle(0)

        assert store.db_path.read_text() == before
        assert (project / "src.conf").read_text() == "appeared later"

    def test_failed_enable_with_missing_source(self, store, source_file, project):
        store.create(source_file, project / "src.conf")
        source_file.unlink()

        with pytest.raises(SourceNotFoundError):
            store.toggle(0)
        assert read_db(project)[0]["enabled"] is False

    def test_disable_when_link_already_gone_warns(self, store, source_file, project):
        store.create(source_file, project / "src.conf", enable=True)
        (project / "src.conf").unlink()

        entry = store.toggle(0)
        assert entry.enabled is False
        assert any("already absent" in w for w in store.warnings)

    def test_unknown_id(self, store):
        with pytest.raises(EntryNotFoundError):
            store.toggle(7)

    def test_unknown_target(self, store, project):
        with pytest.raises(EntryNotFoundError):
            store.toggle(str(project / "nothing"))


class TestRemove:
    def test_remove_enabled_leaves_no_link(self, store, source_file, project):
        store.create(source_file, project / "src.conf", enable=True)
        removed = store.remove(0)

        assert removed.id == 0
        assert not os.path.lexists(project / "src.conf")
        assert source_file.exists()
        assert store.list() == []

    def test_remove_disabled(self, store, source_file, project):
        store.create(source_file, project / "src.conf")
        store.remove(str(project / "src.conf"))
        assert read_db(project) == []

    def test_remove_keeps_entry_when_unlink_fails(self, store, source_file, project):
        store.create(source_file, project / "src.conf", enable=True)
        (project / "src.conf").unlink()
        (project / "src.conf").write_text("replaced by user")

        with pytest.raises(TargetExistsError):
            store.remove(0)
        assert len(read_db(project)) == 1


class TestDatabase:
    def test_invalid_json(self, store):
        store.db_path.write_text("[{not json")
        with pytest.raises(DatabaseCorruptError):
            store.list()

    def test_not_a_list(self, store):
        store.db_path.write_text(json.dumps({"id": 0}))
        with pytest.raises(DatabaseCorruptError):
            store.list()

    def test_invalid_record(self, store):
        store.db_path.write_text(json.dumps([{"id": 0, "source_path": "/a", "target_path": "/b", "kind": "weird"}]))
        with pytest.raises(DatabaseCorruptError):
            store.list()

    def test_duplicate_ids(self, store):
        record = {"id": 0, "source_path": "/a", "target_path": "/b", "kind": "soft", "enabled": False}
        other = dict(record, target_path="/c")
        store.db_path.write_text(json.dumps([record, other]))
        with pytest.raises(DatabaseCorruptError):
            store.list()

    def test_save_leaves_no_temp_file(self, store, source_file, project):
        store.create(source_file, project / "src.conf")
        assert sorted(p.name for p in store.db_dir.iterdir()) == ["links"]


class TestReconcile:
    def test_consistent_store_has_no_operations(self, store, source_file, project):
        store.create(source_file, project / "on.conf", enable=True)
        store.create(source_file, project / "off.conf")
        assert store.check() == []

    def test_apply_recreates_missing_link(self, store, source_file, project):
        store.create(source_file, project / "src.conf", enable=True)
        (project / "src.conf").unlink()

        operations = store.check()
        assert [op.action for op in operations] == ["create"]
        assert not os.path.lexists(project / "src.conf")

        report = store.apply()
        assert [op.action for op in report.applied] == ["create"]
        assert (project / "src.conf").is_symlink()
        assert store.check() == []

    def test_apply_removes_link_of_disabled_entry(self, store, source_file, project):
        store.create(source_file, project / "src.conf")
        (project / "src.conf").symlink_to(source_file)

        report = store.apply()
        assert [op.action for op in report.applied] == ["remove"]
        assert not os.path.lexists(project / "src.conf")

    def test_apply_disables_entry_with_vanished_source(self, store, source_file, project):
        store.create(source_file, project / "src.conf", enable=True)
        source_file.unlink()

        report = store.apply()
        assert [op.action for op in report.applied] == ["remove"]
        assert not os.path.lexists(project / "src.conf")
        assert read_db(project)[0]["enabled"] is False

    def test_apply_reports_conflict_without_touching_it(self, store, source_file, project):
        store.create(source_file, project / "src.conf", enable=True)
        (project / "src.conf").unlink()
        (project / "src.conf").write_text("user file")

        report = store.apply()
        assert report.applied == []
        assert [op.entry_id for op in report.conflicts] == [0]
        assert (project / "src.conf").read_text() == "user file"
        assert store.warnings


class TestGet:
    def test_get_by_id_and_target(self, store, source_file, project):
        created = store.create(source_file, project / "src.conf")
        assert store.get(0) == created
        assert store.get("0") == created
        assert store.get(project / "src.conf") == created

    def test_get_relative_target(self, store, source_file, project, monkeypatch):
        store.create(source_file, project / "mod" / "src.conf")
        monkeypatch.chdir(project)
        assert store.get("mod/src.conf").id == 0


class TestFailedSave:
    @pytest.fixture
    def unwritable(self, store):
        """Make the next database save fail by occupying its temp file path with a directory."""

        def block():
            (store.db_dir / "links.tmp").mkdir()

        return block

    def test_enable_is_reverted(self, store, source_file, project, unwritable):
        store.create(source_file, project / "src.conf")
        unwritable()

        with pytest.raises(DatabaseWriteError):
            store.toggle(0)

        assert not os.path.lexists(project / "src.conf")
        assert read_db(project)[0]["enabled"] is False

    def test_disable_is_reverted(self, store, source_file, project, unwritable):
        store.create(source_file, project / "src.conf", enable=True)
        unwritable()

        with pytest.raises(DatabaseWriteError):
            store.toggle(0)

        assert (project / "src.conf").is_symlink()
        assert read_db(project)[0]["enabled"] is True

    def test_remove_is_reverted(self, store, source_file, project, unwritable):
        store.create(source_file, project / "src.conf", LinkKind.HARD, enable=True)
        unwritable()

        with pytest.raises(DatabaseWriteError):
            store.remove(0)

        assert os.path.samefile(source_file, project / "src.conf")
        assert len(read_db(project)) == 1

    def test_create_with_enable_is_reverted(self, store, source_file, project, unwritable):
        unwritable()

        with pytest.raises(DatabaseWriteError):
            store.create(source_file, project / "src.conf", enable=True)

        assert not os.path.lexists(project / "src.conf")
        assert read_db(project) == []
