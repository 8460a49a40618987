"""
config.py - Search and evaluation configuration

Evaluation weights and search limits are plain frozen dataclasses so they can
be passed through the engine and tuned or tested independently of the search
control flow.
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Mapping

from c4engine.utils import ROWS, COLS, InvalidSearchParameterError
from c4engine.game.rules import check_positive_int

# Defaults used by the interactive application: depth 8, 1.2 s per move
DEFAULT_MAX_DEPTH = 8
DEFAULT_TIME_LIMIT_MS = 1200


@dataclass(frozen=True)
class EvaluationWeights:
    """Scores of the static evaluator, from the mover's point of view."""
    center: int = 3                 # per mover piece in the center column
    four: int = 100000              # mover owns a whole window
    three: int = 100                # 3 mover + 1 empty
    two: int = 10                   # 2 mover + 2 empty
    opponent_three: int = -80       # 3 opponent + 1 empty


DEFAULT_WEIGHTS = EvaluationWeights()


@dataclass(frozen=True)
class SearchConfig:
    """
    Limits and board geometry for one engine.

    Attributes:
        max_depth: Deepest iterative-deepening iteration
        time_limit_ms: Wall-clock budget per move
        rows: Board height
        cols: Board width
        weights: Static evaluation weights
    """
    max_depth: int = DEFAULT_MAX_DEPTH
    time_limit_ms: int = DEFAULT_TIME_LIMIT_MS
    rows: int = ROWS
    cols: int = COLS
    weights: EvaluationWeights = field(default_factory=EvaluationWeights)

    def validate(self) -> 'SearchConfig':
        """
        Check every limit.

        Returns:
            self, so calls can be chained

        Raises:
            InvalidSearchParameterError: a limit is not a positive integer
        """
        for name in ("max_depth", "time_limit_ms", "rows", "cols"):
            check_positive_int(name, getattr(self, name))
        if not isinstance(self.weights, EvaluationWeights):
            raise InvalidSearchParameterError(
                f"weights must be EvaluationWeights, got {type(self.weights).__name__}")
        return self

    def replace(self, **changes) -> 'SearchConfig':
        """Copy of this config with some fields changed."""
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> 'SearchConfig':
        """
        Build a config from a plain mapping, e.g. a section of a settings file.

        A nested "weights" mapping is turned into EvaluationWeights.

        Raises:
            InvalidSearchParameterError: unknown keys or invalid limits
        """
        known = {f.name for f in fields(cls)}
        unknown = set(values) - known
        if unknown:
            raise InvalidSearchParameterError(f"Unknown search config keys: {sorted(unknown)}")

        kwargs: Dict[str, Any] = dict(values)
        weights = kwargs.get("weights")
        if isinstance(weights, Mapping):
            weight_names = {f.name for f in fields(EvaluationWeights)}
            bad = set(weights) - weight_names
            if bad:
                raise InvalidSearchParameterError(f"Unknown evaluation weights: {sorted(bad)}")
            kwargs["weights"] = EvaluationWeights(**weights)

        return cls(**kwargs).validate()

    def to_dict(self) -> Dict[str, Any]:
        """Plain-dict form of the config (weights nested)."""
        return {
            "max_depth": self.max_depth,
            "time_limit_ms": self.time_limit_ms,
            "rows": self.rows,
            "cols": self.cols,
            "weights": {f.name: getattr(self.weights, f.name) for f in fields(EvaluationWeights)},
        }
