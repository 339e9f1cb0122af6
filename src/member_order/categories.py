"""Member category vocabulary and the default canonical order.

Every class member is classified into exactly one of these categories.
The position of a category in DEFAULT_ORDER is its rank; members of a class
are expected to appear with non-decreasing rank.
"""

from types import MappingProxyType

STATIC_PROPERTY = "static-property"
STATIC_METHOD = "static-method"

COMPONENT_INPUT = "component-input"
COMPONENT_OUTPUT = "component-output"

COMPONENT_HOSTBINDING_ATTR = "component-hostbinding-attr"
COMPONENT_HOSTBINDING_CLASS = "component-hostbinding-class"
COMPONENT_HOSTBINDING_STYLE = "component-hostbinding-style"
COMPONENT_HOSTBINDING_OTHER = "component-hostbinding-other"

COMPONENT_CONTENTCHILD = "component-contentchild"
COMPONENT_CONTENTCHILDREN = "component-contentchildren"
COMPONENT_VIEWCHILD = "component-viewchild"
COMPONENT_VIEWCHILDREN = "component-viewchildren"

INSTANCE_PROPERTY = "instance-property"
INSTANCE_CONSTRUCTOR = "instance-constructor"

COMPONENT_LISTENER_GLOBAL = "component-listener-global"
COMPONENT_LISTENER_HOST = "component-listener-host"
COMPONENT_LISTENER_VIEW = "component-listener-view"

INSTANCE_METHOD = "instance-method"

# Never part of an order, so never compared
UNKNOWN = "unknown"

_LIFECYCLE_PREFIX = "lifecycle-"

# Angular lifecycle hooks in the order the framework calls them
LIFECYCLE_HOOKS: tuple[str, ...] = (
    "ngOnChanges",
    "ngOnInit",
    "ngDoCheck",
    "ngAfterContentInit",
    "ngAfterContentChecked",
    "ngAfterViewInit",
    "ngAfterViewChecked",
    "ngOnDestroy",
)


def lifecycle_category(hook_name: str) -> str:
    """Return the category for a lifecycle hook, e.g. ngOnInit -> lifecycle-oninit."""
    return _LIFECYCLE_PREFIX + hook_name.removeprefix("ng").lower()


LIFECYCLE_CATEGORIES: MappingProxyType[str, str] = MappingProxyType(
    {hook: lifecycle_category(hook) for hook in LIFECYCLE_HOOKS}
)

DEFAULT_ORDER: tuple[str, ...] = (
    STATIC_PROPERTY,
    STATIC_METHOD,
    COMPONENT_INPUT,
    COMPONENT_OUTPUT,
    COMPONENT_HOSTBINDING_ATTR,
    COMPONENT_HOSTBINDING_CLASS,
    COMPONENT_HOSTBINDING_STYLE,
    COMPONENT_HOSTBINDING_OTHER,
    COMPONENT_CONTENTCHILD,
    COMPONENT_CONTENTCHILDREN,
    COMPONENT_VIEWCHILD,
    COMPONENT_VIEWCHILDREN,
    INSTANCE_PROPERTY,
    INSTANCE_CONSTRUCTOR,
    *LIFECYCLE_CATEGORIES.values(),
    COMPONENT_LISTENER_GLOBAL,
    COMPONENT_LISTENER_HOST,
    COMPONENT_LISTENER_VIEW,
    INSTANCE_METHOD,
)

CATEGORIES: frozenset[str] = frozenset(DEFAULT_ORDER)


def is_category(value: str) -> bool:
    """Check whether a string names a category in the fixed vocabulary."""
    return value in CATEGORIES
