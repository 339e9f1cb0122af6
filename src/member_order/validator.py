"""Order validation for classified class members."""

from collections.abc import Iterable, Sequence

from member_order.categories import DEFAULT_ORDER, is_category
from member_order.classifier import classify
from member_order.errors import InvalidConfigurationError
from member_order.models import MemberModel, ViolationModel


def validate_order_spec(order: Iterable[str]) -> None:
    """Validate a custom category order against the category vocabulary.

    Duplicate entries are accepted; lookups use the first occurrence.

    Args:
        order: Candidate order of category names

    Raises:
        InvalidConfigurationError: On the first entry that is not a category

    """
    for entry in order:
        if not is_category(entry):
            raise InvalidConfigurationError(
                f'"{entry}" is not a valid order option', entry=entry
            )


def _rank_lookup(order: Sequence[str]) -> dict[str, int]:
    ranks: dict[str, int] = {}
    for position, category in enumerate(order):
        ranks.setdefault(category, position)
    return ranks


def find_violations(
    members: Sequence[MemberModel], order: Sequence[str] = DEFAULT_ORDER
) -> list[ViolationModel]:
    """Find members declared out of order relative to their predecessor.

    Each member is compared only with the member immediately before it in
    declaration order. A member whose category is not in ``order`` (including
    UNKNOWN) is never reported, and a member following it is never reported
    either.

    Args:
        members: Direct class members in declaration order
        order: Canonical category order

    Returns:
        Violations in ascending declaration index

    """
    ranks = _rank_lookup(order)
    classified = [classify(member) for member in members]

    violations: list[ViolationModel] = []
    for index in range(1, len(classified)):
        category = classified[index]
        previous_category = classified[index - 1]
        rank = ranks.get(category, -1)
        if rank >= 0 and rank < ranks.get(previous_category, -1):
            violations.append(
                ViolationModel(
                    member=members[index],
                    category=category,
                    index=index,
                    previous_category=previous_category,
                )
            )
    return violations
