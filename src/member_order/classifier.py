"""Classify class members into member order categories.

Classification is driven by a priority-ordered rule table. Each rule pairs a
predicate with a resolver; the first rule whose predicate matches decides the
category. Members that match no rule are classified as UNKNOWN.
"""

from collections.abc import Callable

from member_order import categories as cat
from member_order.models import DecoratorModel, MemberModel

_INPUT = "Input"
_OUTPUT = "Output"
_HOST_BINDING = "HostBinding"
_HOST_LISTENER = "HostListener"

_QUOTES = "'\"`"
_GLOBAL_TARGET_SEPARATOR = ":"
_VIEW_LISTENER_PREFIX = "on"

_HOST_BINDING_PREFIXES = {
    "attr": cat.COMPONENT_HOSTBINDING_ATTR,
    "class": cat.COMPONENT_HOSTBINDING_CLASS,
    "style": cat.COMPONENT_HOSTBINDING_STYLE,
}

# Query decorators for property members, checked in this order
_QUERY_DECORATORS = (
    ("ContentChild", cat.COMPONENT_CONTENTCHILD),
    ("ContentChildren", cat.COMPONENT_CONTENTCHILDREN),
    ("ViewChild", cat.COMPONENT_VIEWCHILD),
    ("ViewChildren", cat.COMPONENT_VIEWCHILDREN),
)


def classify_host_binding(decorator: DecoratorModel) -> str:
    """Classify a HostBinding decorator by its binding target prefix.

    ``'class.active'`` gives component-hostbinding-class, ``'attr.role'`` gives
    component-hostbinding-attr and ``'style.color'`` gives
    component-hostbinding-style. Anything else is component-hostbinding-other.
    """
    binding = decorator.first_argument
    if not binding:
        return cat.COMPONENT_HOSTBINDING_OTHER

    if binding[0] in _QUOTES:
        binding = binding[1:]

    prefix, dot, _ = binding.partition(".")
    if not dot:
        return cat.COMPONENT_HOSTBINDING_OTHER
    return _HOST_BINDING_PREFIXES.get(prefix, cat.COMPONENT_HOSTBINDING_OTHER)


def classify_host_listener(decorator: DecoratorModel) -> str:
    """Classify a HostListener decorator as a global or host listener."""
    event = decorator.first_argument or ""
    if _GLOBAL_TARGET_SEPARATOR in event:
        return cat.COMPONENT_LISTENER_GLOBAL
    return cat.COMPONENT_LISTENER_HOST


def is_view_listener_name(name: str | None) -> bool:
    """Check for the onSomething handler naming convention."""
    return (
        name is not None
        and len(name) >= 3
        and name.startswith(_VIEW_LISTENER_PREFIX)
        and name[2].isupper()
    )


def _classify_property(member: MemberModel) -> str:
    host_binding = member.get_decorator(_HOST_BINDING)
    if host_binding:
        return classify_host_binding(host_binding)

    for decorator_name, category in _QUERY_DECORATORS:
        if member.has_decorator(decorator_name):
            return category

    return cat.STATIC_PROPERTY if member.is_static else cat.INSTANCE_PROPERTY


def _classify_method(member: MemberModel) -> str:
    if member.name in cat.LIFECYCLE_CATEGORIES:
        return cat.LIFECYCLE_CATEGORIES[member.name]

    host_listener = member.get_decorator(_HOST_LISTENER)
    if host_listener:
        return classify_host_listener(host_listener)

    if is_view_listener_name(member.name):
        return cat.COMPONENT_LISTENER_VIEW

    return cat.STATIC_METHOD if member.is_static else cat.INSTANCE_METHOD


def _classify_getter(member: MemberModel) -> str:
    host_binding = member.get_decorator(_HOST_BINDING)
    if host_binding is None:
        return cat.UNKNOWN
    return classify_host_binding(host_binding)


Rule = tuple[Callable[[MemberModel], bool], Callable[[MemberModel], str]]

_RULES: tuple[Rule, ...] = (
    (lambda m: m.has_decorator(_INPUT), lambda _: cat.COMPONENT_INPUT),
    (lambda m: m.has_decorator(_OUTPUT), lambda _: cat.COMPONENT_OUTPUT),
    (lambda m: m.kind == "constructor", lambda _: cat.INSTANCE_CONSTRUCTOR),
    (lambda m: m.kind == "getter", _classify_getter),
    (lambda m: m.kind == "property", _classify_property),
    (lambda m: m.kind == "method", _classify_method),
)


def classify(member: MemberModel) -> str:
    """Classify a class member into its member order category.

    Args:
        member: The member to classify

    Returns:
        One of the categories in DEFAULT_ORDER, or UNKNOWN when no rule applies

    """
    for matches, resolve in _RULES:
        if matches(member):
            return resolve(member)
    return cat.UNKNOWN
