# kakariuke/validators.py
from typing import List, Dict, Any, Sequence
import logging

from kakariuke.core.data_structures import ParseResult

logger = logging.getLogger(__name__)


class ValidationResult:
    """DTO for validation results."""

    def __init__(self, is_valid: bool, errors: List[str]):
        self.is_valid = is_valid
        self.errors = errors


class ResultValidator:
    """
    Checks the structural invariants of a ParseResult:
    token coverage, bunsetsu ids, edge count and order, target range.
    """

    @staticmethod
    def validate(result: ParseResult) -> ValidationResult:
        errors = []
        bunsetsu = result.bunsetsu
        n = len(bunsetsu)

        # 1. Coverage: bunsetsu runs must reconstruct the morpheme stream
        covered = [t for b in bunsetsu for t in b.tokens]
        if covered != list(result.tokens):
            errors.append(
                f"Coverage mismatch: {len(covered)} morphemes in bunsetsu, {len(result.tokens)} in input"
            )

        if result.tokens and not bunsetsu:
            errors.append("Non-empty morpheme stream produced no bunsetsu")

        # 2. Ids are positions
        for position, b in enumerate(bunsetsu):
            if b.id != position:
                errors.append(f"Bunsetsu at position {position} has id {b.id}")

        # 3. One edge per non-final bunsetsu, in order
        expected_edges = max(0, n - 1)
        if len(result.dependencies) != expected_edges:
            errors.append(f"Expected {expected_edges} edges, found {len(result.dependencies)}")

        for position, edge in enumerate(result.dependencies):
            if edge.from_ != position:
                errors.append(f"Edge {position} has from={edge.from_}")

            if not 0 <= edge.to < n:
                errors.append(f"Edge {edge.from_}->{edge.to}: target out of range 0..{n - 1}")
            elif edge.to == edge.from_ and n > 1:
                errors.append(f"Edge {edge.from_}: self-loop")

        return ValidationResult(len(errors) == 0, errors)

    @staticmethod
    def validate_batch(results: Sequence[ParseResult]) -> Dict[str, Any]:
        """Aggregated validation statistics for a set of results."""
        stats = {
            "total": len(results),
            "valid": 0,
            "invalid": 0,
            "errors": []
        }

        for idx, result in enumerate(results):
            res = ResultValidator.validate(result)
            if res.is_valid:
                stats["valid"] += 1
            else:
                stats["invalid"] += 1
                stats["errors"].append({"index": idx, "text": result.text, "issues": res.errors})

        logger.info(f"Validated {stats['total']} results: {stats['invalid']} invalid")

        return stats
