"""Config driven sampling runs, used to pin and inspect output streams."""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, List

from .errors import ConfigError, RandomError
from .prng import VARIANTS, make_generator

logger = logging.getLogger(__name__)

INTEGER_DISTRIBUTIONS = ("u64", "below", "int")
FLOAT_DISTRIBUTIONS = (
    "float01",
    "double01",
    "float",
    "double",
    "float_gaussian",
    "double_gaussian",
)
DISTRIBUTIONS = INTEGER_DISTRIBUTIONS + FLOAT_DISTRIBUTIONS


@dataclass
class SampleConfig:
    """Configuration for one deterministic sampling run."""

    seed: int = 0
    variant: str = "plus-plus"
    distribution: str = "u64"
    count: int = 10
    lower: float = 0.0  # float/double bounds; truncated for "int"
    upper: float = 1.0
    mu: float = 0.0
    sigma: float = 1.0
    bound: int = 6  # exclusive bound for "below"
    include_samples: bool = True


def _validate(cfg: SampleConfig) -> None:
    if cfg.variant not in VARIANTS:
        raise ConfigError(f"Unknown variant '{cfg.variant}', expected one of {sorted(VARIANTS)}.")
    if cfg.distribution not in DISTRIBUTIONS:
        raise ConfigError(
            f"Unknown distribution '{cfg.distribution}', expected one of {list(DISTRIBUTIONS)}."
        )
    if cfg.count <= 0:
        raise ConfigError("Sample count must be a positive integer.")
    if cfg.distribution in ("float", "double") and not cfg.lower < cfg.upper:
        raise ConfigError("Float ranges need lower < upper.")


def _sampler(cfg: SampleConfig, rng) -> Callable[[], Any]:
    """Bind the configured distribution to a zero-argument draw."""

    dist = cfg.distribution
    if dist == "u64":
        return rng.next_u64
    if dist == "below":
        return lambda: rng.checked_below(cfg.bound)
    if dist == "int":
        lower, upper = int(cfg.lower), int(cfg.upper)
        return lambda: rng.checked_int_in_range(lower, upper)
    if dist == "float01":
        return rng.float01
    if dist == "double01":
        return rng.double01
    if dist == "float":
        return lambda: rng.float_in_range(cfg.lower, cfg.upper)
    if dist == "double":
        return lambda: rng.double_in_range(cfg.lower, cfg.upper)
    if dist == "float_gaussian":
        return lambda: rng.float_gaussian(cfg.mu, cfg.sigma)
    return lambda: rng.double_gaussian(cfg.mu, cfg.sigma)


def _summarize(samples: List[Any]) -> Dict[str, Any]:
    count = len(samples)
    mean = sum(samples) / count
    variance = sum((value - mean) ** 2 for value in samples) / count
    return {
        "count": count,
        "min": min(samples),
        "max": max(samples),
        "mean": float(mean),
        "variance": float(variance),
    }


def run_sample_report(cfg: SampleConfig) -> Dict[str, Any]:
    """Draw ``cfg.count`` samples, fully driven by the seed."""

    _validate(cfg)
    rng = make_generator(cfg.variant, cfg.seed)
    initial = list(rng.getstate())

    draw = _sampler(cfg, rng)
    try:
        raw = [draw() for _ in range(cfg.count)]
    except RandomError as exc:
        raise ConfigError(str(exc)) from exc

    if cfg.distribution in INTEGER_DISTRIBUTIONS:
        samples: List[Any] = [int(value) for value in raw]
    else:
        samples = [float(value) for value in raw]

    logger.debug(
        "Drew %d %s samples from %s (seed=0x%x)",
        cfg.count,
        cfg.distribution,
        cfg.variant,
        cfg.seed,
    )

    report: Dict[str, Any] = {
        "config": asdict(cfg),
        "state": {"initial": initial, "final": list(rng.getstate())},
        "summary": _summarize(samples),
    }
    if cfg.include_samples:
        report["samples"] = samples
        if cfg.distribution == "u64":
            report["hex"] = [f"0x{value:016x}" for value in samples]
    return report


if __name__ == "__main__":
    import json

    result = run_sample_report(SampleConfig())
    print(json.dumps(result, indent=2))
