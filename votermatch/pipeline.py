"""
End-to-end matching run: load inputs, filter voters, match, save.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from .config import Config
from .exceptions import ConfigurationError
from .logger import get_logger
from .matching import ConfidenceClassifier, MatchEngine, filter_by_city, tag_owner_type
from .models import MatchRunResult, OwnerRecord
from .persistence import MatchStore
from .progress import get_progress
from .utils import timed_stage

logger = get_logger(__name__)


@dataclass(frozen=True)
class OwnerSource:
    """An owner JSON file, optionally tagged with a dataset type."""
    path: Path
    owner_type: Optional[str] = None


def parse_owner_source(value: str) -> OwnerSource:
    """
    Parse an --owners argument: "PATH" or "TYPE=PATH".

    Examples:
        owner_occupied.json
        owner_occupied=data/owner_occupied.json
    """
    value = value.strip()
    if not value:
        raise ConfigurationError("Empty owner source", config_key="--owners")

    if "=" in value:
        owner_type, path = value.split("=", 1)
        owner_type, path = owner_type.strip(), path.strip()
        if not owner_type or not path:
            raise ConfigurationError(
                f"Malformed owner source '{value}' (expected TYPE=PATH)",
                config_key="--owners",
            )
        return OwnerSource(path=Path(path), owner_type=owner_type)

    return OwnerSource(path=Path(value))


def run_matching(
    config: Config,
    voters_path: Path,
    owner_sources: Sequence[OwnerSource],
    output_name: Optional[str] = None,
    show_progress: Optional[bool] = None
) -> MatchRunResult:
    """
    Run one matching pass and write its outputs.

    Args:
        config: Application configuration (tier set, filters, paths)
        voters_path: Voter JSON file
        owner_sources: Owner JSON files, in the order they should be matched
        output_name: Output file stem (default from config)
        show_progress: Show a progress bar (default from config)

    Returns:
        The run result; matches are already ranked
    """
    classifier = ConfidenceClassifier.from_tier_set(config.match.tier_set)
    store = MatchStore(config.output_dir)

    with timed_stage("Load inputs", logger) as timing:
        owners: List[OwnerRecord] = []
        for source in owner_sources:
            loaded = store.load_owners(source.path, config.owner_fields)
            if source.owner_type:
                loaded = tag_owner_type(loaded, source.owner_type)
            logger.info(f"Loaded {len(loaded)} owners from {source.path}")
            owners.extend(loaded)

        voters = store.load_voters(voters_path)
        logger.info(f"Loaded {len(voters)} voters from {voters_path}")
        timing.records = len(owners) + len(voters)

    if config.match.voter_city:
        voters = filter_by_city(voters, config.match.voter_city)
        logger.info(f"Voters in {config.match.voter_city.upper()}: {len(voters)}")

    engine = MatchEngine(classifier, require_contact=config.match.require_contact)
    logger.info(
        f"Matching {len(owners)} owners against {len(voters)} voters "
        f"({config.match.tier_set})"
    )

    if show_progress is None:
        show_progress = config.show_progress
    progress = get_progress(disable=not show_progress)
    with timed_stage("Match", logger) as timing, progress:
        result = engine.run(owners, voters, progress=progress)
        timing.records = result.pairs_compared

    with timed_stage("Save outputs", logger) as timing:
        store.save_matches(result.matches, output_name or config.output_name)
        timing.records = len(result.matches)

    logger.debug(f"Run result: {result.to_dict()}")
    return result
