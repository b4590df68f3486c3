import logging
from pathlib import Path

import pytest

from core import Task
from application.ports import InvalidParentError, TaskNotFoundError
from infrastructure.file_repository import FileTaskRepository
from infrastructure.task_file_parser import TaskFileParser


def _repo(tmp_path: Path) -> FileTaskRepository:
    return FileTaskRepository(tmp_path / "tasks")


def test_add_assigns_sequential_ids(tmp_path: Path):
    repo = _repo(tmp_path)
    first = repo.add("Write report")
    second = repo.add("Outline", parent=first.id)
    assert first == Task(id=1, description="Write report", complete=False, parent=None)
    assert second.id == 2
    assert second.parent == 1
    assert repo.next_id() == 3


def test_file_roundtrip(tmp_path: Path):
    repo = _repo(tmp_path)
    task = repo.add("Multi word ünïcode description 日本")
    path = repo.tasks_dir / "1.task"
    assert path.exists()
    assert TaskFileParser.parse(path) == task
    assert TaskFileParser.created_at(path)


def test_add_rejects_missing_parent(tmp_path: Path):
    repo = _repo(tmp_path)
    with pytest.raises(InvalidParentError) as excinfo:
        repo.add("orphan", parent=1)
    assert excinfo.value.parent_id == 1
    assert repo.fetch_all() == []


def test_add_rejects_self_parent(tmp_path: Path):
    repo = _repo(tmp_path)
    repo.add("root")
    with pytest.raises(InvalidParentError):
        repo.add("self", parent=2)


def test_fetch_roots_and_all(tmp_path: Path):
    repo = _repo(tmp_path)
    repo.add("a")
    repo.add("b", parent=1)
    repo.add("c")
    assert [t.id for t in repo.fetch_all()] == [1, 2, 3]
    assert [t.id for t in repo.fetch_roots()] == [1, 3]


def test_fetch_subtree_goes_level_by_level(tmp_path: Path):
    repo = _repo(tmp_path)
    repo.add("root")        # 1
    repo.add("a", parent=1)  # 2
    repo.add("a1", parent=2)  # 3
    repo.add("b", parent=1)  # 4
    repo.add("other root")  # 5
    assert [t.id for t in repo.fetch_subtree(1)] == [1, 2, 4, 3]
    assert [t.id for t in repo.fetch_subtree(2)] == [2, 3]
    assert repo.fetch_subtree(42) == []


def test_fetch_subtree_stops_on_cycles(tmp_path: Path):
    repo = _repo(tmp_path)
    repo.tasks_dir.mkdir(parents=True)
    (repo.tasks_dir / "1.task").write_text(TaskFileParser.to_file_content(Task(1, "x", parent=2)), encoding="utf-8")
    (repo.tasks_dir / "2.task").write_text(TaskFileParser.to_file_content(Task(2, "y", parent=1)), encoding="utf-8")
    assert [t.id for t in repo.fetch_subtree(1)] == [1, 2]


def test_remove_cascades(tmp_path: Path):
    repo = _repo(tmp_path)
    repo.add("root")
    repo.add("child", parent=1)
    repo.add("grandchild", parent=2)
    repo.add("keep")
    removed = repo.remove(2)
    assert [t.id for t in removed] == [2, 3]
    assert [t.id for t in repo.fetch_all()] == [1, 4]
    assert repo.remove(2) == []


def test_set_completion(tmp_path: Path):
    repo = _repo(tmp_path)
    repo.add("root")
    created = TaskFileParser.created_at(repo.tasks_dir / "1.task")
    done = repo.set_completion(1, True)
    assert done.complete is True
    assert repo.load(1).complete is True
    assert TaskFileParser.created_at(repo.tasks_dir / "1.task") == created
    assert repo.set_completion(1, False).complete is False


def test_set_completion_unknown_task(tmp_path: Path):
    repo = _repo(tmp_path)
    with pytest.raises(TaskNotFoundError):
        repo.set_completion(7, True)


def test_unreadable_files_are_skipped(tmp_path: Path, caplog):
    repo = _repo(tmp_path)
    repo.add("fine")
    (repo.tasks_dir / "2.task").write_text("---\nid: [unclosed\n---\nbroken\n", encoding="utf-8")
    (repo.tasks_dir / "3.task").write_text("no front matter", encoding="utf-8")
    (repo.tasks_dir / "notes.task").write_text("---\nid: 9\n---\nignored\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="teal.store"):
        tasks = repo.fetch_all()
    assert [t.id for t in tasks] == [1]
    assert "2.task" in caplog.text


def test_missing_directory_is_empty(tmp_path: Path):
    repo = _repo(tmp_path)
    assert repo.fetch_all() == []
    assert repo.next_id() == 1
    assert repo.load(1) is None


def test_invalid_id_rejected(tmp_path: Path):
    repo = _repo(tmp_path)
    with pytest.raises(ValueError):
        repo.load(0)


def test_parser_reads_id_from_filename_when_missing(tmp_path: Path):
    path = tmp_path / "12.task"
    path.write_text("---\nparent: 3\ncomplete: true\n---\nbody text\n", encoding="utf-8")
    assert TaskFileParser.parse(path) == Task(id=12, description="body text", complete=True, parent=3)


@pytest.mark.parametrize("front_matter", ["id: null", "parent: [1]", "parent: {a: 1}", "id: true"])
def test_non_integer_ids_are_skipped(tmp_path: Path, caplog, front_matter):
    repo = _repo(tmp_path)
    repo.add("fine")
    (repo.tasks_dir / "2.task").write_text(f"---\n{front_matter}\n---\nbad\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="teal.store"):
        assert [t.id for t in repo.fetch_all()] == [1]
        assert [t.id for t in repo.fetch_subtree(1)] == [1]
    assert "2.task" in caplog.text


def test_description_keeps_surrounding_newlines(tmp_path: Path):
    repo = _repo(tmp_path)
    task = repo.add("\nfirst line\n\nlast line\n")
    assert repo.load(task.id).description == "\nfirst line\n\nlast line\n"
