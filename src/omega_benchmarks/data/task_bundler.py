"""Learning task bundles and their on-disk layout.

Directory layout
----------------
Everything is written below one output root::

    automata/{variant}__aut_size={N}__{index:02}.hoa
    sets/word_set__aut_size={N}__sample_size={M}__{index:02}_{train|test}.csv
    tasks/{task_name}/aut.hoa
    tasks/{task_name}/train.csv
    tasks/{task_name}/test.csv

where ``task_name`` is
``{variant}_task__aut_size={N}__sample_size={M}__{variant}{aut:02}__sample{set:02}``.

Word records are CSV rows ``spoke,cycle`` (unlabelled) or
``spoke,cycle,verdict`` (labelled), symbols concatenated into one string and
verdicts written as ``true`` / ``false``. Every export overwrites existing
files. Any failure to create a directory or write a file is raised as
:class:`PersistenceFailure`.
"""

import csv
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from ..automata.automaton import AcceptanceVariant
from ..automata.backend import AutomataBackend, DefaultBackend
from ..automata.hoa import parse_hoa
from ..automata.words import UltimatelyPeriodicWord
from .labeler import LabelledWord

logger = logging.getLogger(__name__)

AUTOMATON_EXTENSION = "hoa"
RECORD_EXTENSION = "csv"

AUTOMATA_DIR = "automata"
SETS_DIR = "sets"
TASKS_DIR = "tasks"
MANIFEST_NAME = "manifest.json"

SPLITS = ("train", "test")


class PersistenceFailure(RuntimeError):
    """A directory could not be created or a file could not be written."""

    def __init__(self, path: Path, cause: OSError):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Cannot write {self.path}: {cause}")


@dataclass(frozen=True)
class LearningTask:
    """One benchmark instance: an automaton with labelled train and test words."""
    name: str
    automaton: Any
    train: Tuple[LabelledWord, ...]
    test: Tuple[LabelledWord, ...]


# -----------------------------------------------------------------------------
# Naming
# -----------------------------------------------------------------------------

def _variant_name(variant: Union[AcceptanceVariant, str]) -> str:
    return AcceptanceVariant(variant).value


def automaton_filename(variant: Union[AcceptanceVariant, str], target_size: int, index: int) -> str:
    """
    File name of an exported automaton.

    Examples
    --------
    >>> automaton_filename("dba", 4, 1)
    'dba__aut_size=4__01.hoa'
    """
    return f"{_variant_name(variant)}__aut_size={target_size}__{index:02d}.{AUTOMATON_EXTENSION}"


def word_set_filename(target_size: int, sample_size: int, index: int, split: str) -> str:
    """
    File name of one split of an exported word set.

    Examples
    --------
    >>> word_set_filename(4, 100, 0, "train")
    'word_set__aut_size=4__sample_size=100__00_train.csv'
    """
    if split not in SPLITS:
        raise ValueError(f"Unknown split '{split}'. Available: {SPLITS}")
    return (f"word_set__aut_size={target_size}__sample_size={sample_size}__"
            f"{index:02d}_{split}.{RECORD_EXTENSION}")


def task_name(variant: Union[AcceptanceVariant, str], target_size: int, sample_size: int,
              aut_index: int, set_index: int) -> str:
    """
    Directory name of a learning task.

    Examples
    --------
    >>> task_name("dba", 4, 100, 1, 0)
    'dba_task__aut_size=4__sample_size=100__dba01__sample00'
    """
    name = _variant_name(variant)
    return (f"{name}_task__aut_size={target_size}__sample_size={sample_size}__"
            f"{name}{aut_index:02d}__sample{set_index:02d}")


# -----------------------------------------------------------------------------
# Records
# -----------------------------------------------------------------------------

def format_verdict(verdict: bool) -> str:
    return "true" if verdict else "false"


def parse_verdict(text: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError(f"Invalid verdict {text!r}, expected 'true' or 'false'")


def word_record(word: UltimatelyPeriodicWord) -> List[str]:
    return [word.spoke_string, word.cycle_string]


def labelled_record(item: LabelledWord) -> List[str]:
    return word_record(item.word) + [format_verdict(item.verdict)]


def _ensure_directory(directory: Path) -> None:
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise PersistenceFailure(directory, exc) from exc


def _write_text(path: Path, text: str) -> Path:
    _ensure_directory(path.parent)
    try:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)
    except OSError as exc:
        raise PersistenceFailure(path, exc) from exc
    return path


def _write_records(path: Path, rows: Iterable[Sequence[str]]) -> Path:
    _ensure_directory(path.parent)
    try:
        with open(path, 'w', encoding='utf-8', newline='') as f:
            writer = csv.writer(f, lineterminator='\n')
            writer.writerows(rows)
    except OSError as exc:
        raise PersistenceFailure(path, exc) from exc
    return path


def read_word_set(path: Union[str, Path]) -> Tuple[UltimatelyPeriodicWord, ...]:
    """Parse unlabelled word records written by :meth:`TaskExporter.export_word_set`."""
    with open(path, 'r', encoding='utf-8', newline='') as f:
        return tuple(UltimatelyPeriodicWord.from_strings(spoke, cycle)
                     for spoke, cycle in csv.reader(f))


def read_labelled_set(path: Union[str, Path]) -> Tuple[LabelledWord, ...]:
    """Parse labelled word records written by :meth:`TaskExporter.export_task`."""
    with open(path, 'r', encoding='utf-8', newline='') as f:
        return tuple(LabelledWord(UltimatelyPeriodicWord.from_strings(spoke, cycle),
                                  parse_verdict(verdict))
                     for spoke, cycle, verdict in csv.reader(f))


def load_task(task_dir: Union[str, Path]) -> LearningTask:
    """
    Read a task bundle back from disk.

    The automaton is parsed with the HOA reader, so only bundles written with
    the default backend can be loaded.
    """
    task_dir = Path(task_dir)
    automaton = parse_hoa((task_dir / f"aut.{AUTOMATON_EXTENSION}").read_text(encoding='utf-8'))
    return LearningTask(
        name=task_dir.name,
        automaton=automaton,
        train=read_labelled_set(task_dir / f"train.{RECORD_EXTENSION}"),
        test=read_labelled_set(task_dir / f"test.{RECORD_EXTENSION}")
    )


# -----------------------------------------------------------------------------
# Exporter
# -----------------------------------------------------------------------------

class TaskExporter:
    """Writes automata, word sets and task bundles below an output root."""

    def __init__(self, output_root: Union[str, Path], backend: Optional[AutomataBackend] = None):
        """
        Parameters
        ----------
        output_root : Union[str, Path]
            Root of the file tree; created lazily on first export
        backend : Optional[AutomataBackend]
            Serializer for automata, defaults to :class:`DefaultBackend`
        """
        self.output_root = Path(output_root)
        self.backend = backend if backend is not None else DefaultBackend()

    @property
    def automata_dir(self) -> Path:
        return self.output_root / AUTOMATA_DIR

    @property
    def sets_dir(self) -> Path:
        return self.output_root / SETS_DIR

    @property
    def tasks_dir(self) -> Path:
        return self.output_root / TASKS_DIR

    def export_automaton(self, automaton: Any, variant: Union[AcceptanceVariant, str],
                         target_size: int, index: int) -> Path:
        """Serialize *automaton* to ``automata/`` and return the file path."""
        filename = automaton_filename(variant, target_size, index)
        text = self.backend.serialize_automaton(automaton, name=filename.rsplit('.', 1)[0])
        path = _write_text(self.automata_dir / filename, text)
        logger.debug("Saved automaton %s", path)
        return path

    def export_word_set(self, train: Iterable[UltimatelyPeriodicWord],
                        test: Iterable[UltimatelyPeriodicWord],
                        target_size: int, sample_size: int, index: int) -> Tuple[Path, Path]:
        """Write both splits of a word set to ``sets/`` and return their paths."""
        paths = []
        for split, words in zip(SPLITS, (train, test)):
            path = self.sets_dir / word_set_filename(target_size, sample_size, index, split)
            paths.append(_write_records(path, (word_record(word) for word in words)))
        logger.debug("Saved word set %s", paths[0].name)
        return paths[0], paths[1]

    def export_task(self, task: LearningTask) -> Path:
        """Write ``aut``, ``train`` and ``test`` of *task* into its own directory."""
        task_dir = self.tasks_dir / task.name
        _ensure_directory(task_dir)

        text = self.backend.serialize_automaton(task.automaton, name=task.name)
        _write_text(task_dir / f"aut.{AUTOMATON_EXTENSION}", text)
        _write_records(task_dir / f"train.{RECORD_EXTENSION}",
                       (labelled_record(item) for item in task.train))
        _write_records(task_dir / f"test.{RECORD_EXTENSION}",
                       (labelled_record(item) for item in task.test))

        logger.debug("Saved task %s", task_dir)
        return task_dir

    def write_manifest(self, manifest: Dict[str, Any]) -> Path:
        """Write the run manifest as JSON to the output root."""
        return _write_text(self.output_root / MANIFEST_NAME, json.dumps(manifest, indent=2))
