"""Benchmark generation pipeline components.

Key Components
--------------
- Planner: word length bounds and oversized generation targets
- Automaton generation: rejection sampling for exact size and informativeness
- Word samples: random ultimately periodic words split into train/test
- Labelling: acceptance verdicts for word samples
- Task bundling: naming, export and read-back of learning tasks

Examples
--------
>>> from omega_benchmarks.data import AutomatonGenerator, AutomatonSpec
>>> spec = AutomatonSpec(alphabet_size=2, target_size=4, variant="dba", lambda_=0.95)
>>> automaton = AutomatonGenerator().generate(spec)  # doctest: +SKIP
"""

from .planner import (
    InvalidTargetSize,
    derive_word_lengths,
    derive_generation_size
)

from .automaton_generator import (
    AutomatonGenerator,
    AutomatonSpec,
    InfeasibleParameters
)

from .word_sample_generator import (
    WordSampleGenerator,
    WordSample,
    split_sample
)

from .labeler import (
    LabelledWord,
    label,
    summarize_labels
)

from .task_bundler import (
    LearningTask,
    TaskExporter,
    PersistenceFailure,
    automaton_filename,
    word_set_filename,
    task_name,
    read_word_set,
    read_labelled_set,
    load_task
)

__all__ = [
    # Core classes
    'AutomatonGenerator',
    'WordSampleGenerator',
    'TaskExporter',

    # Data classes
    'AutomatonSpec',
    'LabelledWord',
    'LearningTask',
    'WordSample',

    # Errors
    'InvalidTargetSize',
    'InfeasibleParameters',
    'PersistenceFailure',

    # Planning functions
    'derive_word_lengths',
    'derive_generation_size',

    # Sampling and labelling
    'split_sample',
    'label',
    'summarize_labels',

    # Naming and read-back
    'automaton_filename',
    'word_set_filename',
    'task_name',
    'read_word_set',
    'read_labelled_set',
    'load_task'
]
