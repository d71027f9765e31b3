"""High-level orchestration of a benchmark generation run.

The pipeline has three stages followed by the manifest:

1. automata: one rejection-sampled automaton per variant, size and index;
2. word sets: one train/test pair per size, train size and index;
3. tasks: every automaton labels every word set of its size.

Each generation unit draws from its own generator seeded from the run seed
and the unit's name, so a unit's output does not depend on which units ran
before it. The run is single-threaded and stops at the first failure; the
manifest is only written after every task has been exported.
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
import logging

from .automata.automaton import AcceptanceVariant
from .automata.backend import AutomataBackend, DefaultBackend
from .config.random_state import resolve_seed, unit_rng
from .config.settings import Settings
from .data.automaton_generator import AutomatonGenerator, AutomatonSpec
from .data.labeler import label, summarize_labels
from .data.planner import derive_word_lengths
from .data.task_bundler import LearningTask, TaskExporter, automaton_filename, task_name
from .data.word_sample_generator import WordSample, WordSampleGenerator

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    """Record of a completed run, written to ``manifest.json``.

    Attributes
    ----------
    creation_time : str
        ISO timestamp of the start of the run
    seed : int
        Run-level random seed actually used
    settings : Dict
        Settings of the run
    automata : List[str]
        Exported automaton paths relative to the output root
    word_sets : List[Dict]
        Exported word sets with their sizes
    tasks : List[Dict]
        Exported tasks with label statistics
    """
    creation_time: str
    seed: int
    settings: Dict[str, Any]
    automata: List[str] = field(default_factory=list)
    word_sets: List[Dict[str, Any]] = field(default_factory=list)
    tasks: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def automaton_spec(settings: Settings, variant: str, target_size: int) -> AutomatonSpec:
    """Generation request for one variant and size under *settings*."""
    variant = AcceptanceVariant(variant)
    return AutomatonSpec(
        alphabet_size=settings.alphabet_size,
        target_size=target_size,
        variant=variant,
        lambda_=settings.acceptance_lambda,
        priority_count=settings.priority_count if variant is AcceptanceVariant.PARITY else None
    )


def _relative(path: Path, root: Path) -> str:
    return str(path.relative_to(root))


def run_pipeline(settings: Settings, backend: Optional[AutomataBackend] = None) -> RunSummary:
    """
    Generate, label and export all learning tasks described by *settings*.

    Parameters
    ----------
    settings : Settings
        Run configuration
    backend : Optional[AutomataBackend]
        Automaton engine, defaults to :class:`DefaultBackend`

    Returns
    -------
    RunSummary
        What was written, also saved as ``manifest.json``

    Raises
    ------
    InfeasibleParameters
        If an automaton could not be generated within ``settings.max_attempts``
    PersistenceFailure
        If any output could not be written
    """
    backend = backend if backend is not None else DefaultBackend()
    seed = resolve_seed(settings.random_seed)
    root = Path(settings.output_dir)

    exporter = TaskExporter(root, backend)
    automaton_generator = AutomatonGenerator(backend, settings.max_attempts)
    word_generator = WordSampleGenerator(backend)

    summary = RunSummary(
        creation_time=datetime.now().isoformat(),
        seed=seed,
        settings=settings.to_dict()
    )
    logger.info("Starting run – output: %s, seed: %d", root, seed)

    # Stage 1: automata -------------------------------------------------------
    automata: Dict[Tuple[str, int], List[Any]] = {}
    for variant in settings.variants:
        for size in settings.automaton_sizes:
            spec = automaton_spec(settings, variant, size)
            generated = []
            for index in range(settings.automata_per_size):
                unit = Path(automaton_filename(variant, size, index)).stem
                logger.info("Generating automaton %s (candidates with %d states)",
                            unit, spec.generation_size)
                automaton = automaton_generator.generate(spec, unit_rng(seed, unit))
                path = exporter.export_automaton(automaton, variant, size, index)
                summary.automata.append(_relative(path, root))
                generated.append(automaton)
            automata[(variant, size)] = generated

    # Stage 2: word sets ------------------------------------------------------
    word_sets: Dict[Tuple[int, int], List[Tuple[WordSample, WordSample]]] = {}
    for size in settings.automaton_sizes:
        spoke_len, cycle_len = derive_word_lengths(size)
        for train_size in settings.train_sizes:
            generated_sets = []
            for index in range(settings.sets_per_size):
                unit = f"word_set__aut_size={size}__sample_size={train_size}__{index:02d}"
                train, test = word_generator.generate(
                    settings.alphabet_size, spoke_len, cycle_len,
                    train_size, settings.test_size, unit_rng(seed, unit)
                )
                train_path, test_path = exporter.export_word_set(train, test, size, train_size, index)
                summary.word_sets.append({
                    'train': _relative(train_path, root),
                    'test': _relative(test_path, root),
                    'n_train': len(train),
                    'n_test': len(test)
                })
                generated_sets.append((train, test))
            word_sets[(size, train_size)] = generated_sets
        logger.info("Word sets for size %d: spoke_len=%d, cycle_len=%d", size, spoke_len, cycle_len)

    # Stage 3: tasks ----------------------------------------------------------
    for variant in settings.variants:
        for size in settings.automaton_sizes:
            for train_size in settings.train_sizes:
                for aut_index, automaton in enumerate(automata[(variant, size)]):
                    for set_index, (train, test) in enumerate(word_sets[(size, train_size)]):
                        name = task_name(variant, size, train_size, aut_index, set_index)
                        task = LearningTask(
                            name=name,
                            automaton=automaton,
                            train=tuple(label(automaton, train, backend)),
                            test=tuple(label(automaton, test, backend))
                        )
                        task_dir = exporter.export_task(task)
                        summary.tasks.append({
                            'name': name,
                            'path': _relative(task_dir, root),
                            'train': summarize_labels(list(task.train)),
                            'test': summarize_labels(list(task.test))
                        })
                        logger.debug("Task %s exported", name)

    exporter.write_manifest(summary.to_dict())
    logger.info("Run complete – %d automata, %d word sets, %d tasks",
                len(summary.automata), len(summary.word_sets), len(summary.tasks))
    return summary
