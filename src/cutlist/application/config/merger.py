"""Configuration merging for CLI overrides.

Precedence is CLI args > config values > defaults. Only CLI arguments that
are not None override the configuration.
"""

from cutlist.application.config.loader import load_config_from_dict
from cutlist.application.config.schema import CutlistConfiguration


def merge_config_with_cli(
    config: CutlistConfiguration,
    *,
    attempts: int | None = None,
    results: int | None = None,
    seed: int | None = None,
    spacing: float | None = None,
    fit: str | None = None,
) -> CutlistConfiguration:
    """Return a new configuration with CLI overrides applied.

    The merged values are validated again, so an out-of-range override is
    reported as a ConfigError just like a bad value in the file.

    Example:
        >>> merged = merge_config_with_cli(config, attempts=5000, seed=42)
        >>> merged.search.attempts
        5000
    """
    data = config.model_dump(mode="json")
    search = data["search"]
    if attempts is not None:
        search["attempts"] = attempts
    if results is not None:
        search["results"] = results
    if seed is not None:
        search["seed"] = seed
    if fit is not None:
        search["fit"] = fit
    if spacing is not None:
        data["spacing"] = spacing

    return load_config_from_dict(data)
