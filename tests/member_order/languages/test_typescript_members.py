"""Tests for TypeScript class member extraction."""

import pytest

from member_order.languages.typescript import TypeScriptMemberExtractor
from member_order.models import ClassDeclarationModel

TS_COMPONENT = """
@Component({ selector: 'app-root' })
export class AppComponent implements OnInit {
    static count = 0;
    @Input() label: string;
    @Output() changed = new EventEmitter();
    @HostBinding('class.active') get active(): boolean { return true; }
    @ViewChild('panel', { static: true }) panel: ElementRef;
    items: string[] = [];

    constructor(private http: HttpClient) {}

    ngOnInit(): void {}

    @HostListener('window:resize', ['$event'])
    onResize(event: Event): void {}

    onClick(): void {}

    static create(): AppComponent {
        return new AppComponent(null);
    }

    refresh(): void {}
}
"""

TS_POSITIONS = "class Store {\n  items = [];\n  static x = 1;\n}\n"

TS_ACCESSORS = """
class Settings {
    get value(): string { return this._value; }
    set value(v: string) { this._value = v; }
    private _value = '';
}
"""

TS_ABSTRACT_CLASS = """
abstract class Repository {
    [key: string]: unknown;
    abstract find(id: string): Entity;
    save(entity: Entity): void {}
}
"""

TS_OVERLOADS = """
class Formatter {
    format(value: string): string;
    format(value: number): string;
    format(value: unknown): string {
        return String(value);
    }
}
"""

TS_EMPTY_ELEMENTS = """
class Toolbar {
    ;
    refresh() {};
    static size = 1;
    label = '';;
    [key: string]: unknown;
}
"""

TS_NESTED_CLASSES = """
class Outer {
    build() {
        class Inner {
            value = 1;
        }
        return new Inner();
    }
}
"""

TS_DECORATOR_FORMS = """
class Widget {
    @Input label: string;
    @ng.Output() changed = new EventEmitter();
    @HostBinding("attr.role") role = 'button';
    // explains the listener
    @HostListener('click')
    // stays attached across comments
    handleClick(): void {}
}
"""

TS_NO_CLASSES = """
function helper(): number {
    return 1;
}
"""


def _extract(source_code: str) -> list[ClassDeclarationModel]:
    return TypeScriptMemberExtractor().extract_source(source_code)


class TestClassDiscovery:
    """Tests for finding class declarations."""

    def test_exported_decorated_class(self) -> None:
        """Exported classes with class decorators are found."""
        classes = _extract(TS_COMPONENT)

        assert len(classes) == 1
        assert classes[0].name == "AppComponent"
        assert classes[0].line == 3

    def test_nested_classes_in_document_order(self) -> None:
        """Nested classes are found and keep their own members."""
        classes = _extract(TS_NESTED_CLASSES)

        assert [c.name for c in classes] == ["Outer", "Inner"]
        assert [m.name for m in classes[0].members] == ["build"]
        assert [m.name for m in classes[1].members] == ["value"]

    def test_abstract_class(self) -> None:
        """Abstract classes are found."""
        classes = _extract(TS_ABSTRACT_CLASS)

        assert [c.name for c in classes] == ["Repository"]

    def test_source_without_classes(self) -> None:
        """Sources without classes produce no declarations."""
        assert _extract(TS_NO_CLASSES) == []
        assert _extract("") == []


class TestMemberExtraction:
    """Tests for extracting class members in source order."""

    def test_component_members_in_order(self) -> None:
        """All direct members are extracted in declaration order."""
        members = _extract(TS_COMPONENT)[0].members

        assert [(m.kind, m.name) for m in members] == [
            ("property", "count"),
            ("property", "label"),
            ("property", "changed"),
            ("getter", "active"),
            ("property", "panel"),
            ("property", "items"),
            ("constructor", "constructor"),
            ("method", "ngOnInit"),
            ("method", "onResize"),
            ("method", "onClick"),
            ("method", "create"),
            ("method", "refresh"),
        ]

    def test_static_modifier(self) -> None:
        """Static members are flagged as static."""
        members = {m.name: m for m in _extract(TS_COMPONENT)[0].members}

        assert members["count"].is_static
        assert members["create"].is_static
        assert not members["items"].is_static
        assert not members["refresh"].is_static

    def test_decorators_and_arguments(self) -> None:
        """Decorator names and raw argument text are extracted."""
        members = {m.name: m for m in _extract(TS_COMPONENT)[0].members}

        assert [d.name for d in members["label"].decorators] == ["Input"]
        assert members["label"].decorators[0].arguments == ()

        host_binding = members["active"].get_decorator("HostBinding")
        assert host_binding is not None
        assert host_binding.first_argument == "'class.active'"

        view_child = members["panel"].get_decorator("ViewChild")
        assert view_child is not None
        assert view_child.arguments == ("'panel'", "{ static: true }")

        host_listener = members["onResize"].get_decorator("HostListener")
        assert host_listener is not None
        assert host_listener.arguments == ("'window:resize'", "['$event']")

        assert members["refresh"].decorators == ()

    def test_decorator_forms(self) -> None:
        """Bare, member-expression and commented decorators are handled."""
        members = {m.name: m for m in _extract(TS_DECORATOR_FORMS)[0].members}

        assert members["label"].has_decorator("Input")
        assert members["changed"].decorators[0].name == "ng"
        assert members["role"].decorators[0].first_argument == '"attr.role"'
        assert members["handleClick"].has_decorator("HostListener")
        assert len(members) == 4

    def test_accessors(self) -> None:
        """Getters and setters are distinguished from methods."""
        members = _extract(TS_ACCESSORS)[0].members

        assert [(m.kind, m.name) for m in members] == [
            ("getter", "value"),
            ("setter", "value"),
            ("property", "_value"),
        ]

    def test_index_signature_and_abstract_method(self) -> None:
        """Index signatures are unnamed members and abstract methods are methods."""
        members = _extract(TS_ABSTRACT_CLASS)[0].members

        assert [(m.kind, m.name) for m in members] == [
            ("index_signature", None),
            ("method", "find"),
            ("method", "save"),
        ]

    def test_empty_class_elements(self) -> None:
        """Semicolons that terminate nothing are unnamed members of their own."""
        members = _extract(TS_EMPTY_ELEMENTS)[0].members

        assert [(m.kind, m.name) for m in members] == [
            ("semicolon", None),
            ("method", "refresh"),
            ("semicolon", None),
            ("property", "size"),
            ("property", "label"),
            ("semicolon", None),
            ("index_signature", None),
        ]

    def test_overload_signatures(self) -> None:
        """Overload signatures are reported as separate methods."""
        members = _extract(TS_OVERLOADS)[0].members

        assert [(m.kind, m.name) for m in members] == [("method", "format")] * 3


class TestMemberPositions:
    """Tests for member anchor positions."""

    @pytest.mark.parametrize(
        ("index", "line", "column"),
        [(0, 2, 3), (1, 3, 10)],
        ids=["instance_property", "static_property"],
    )
    def test_position_of_member_name(self, index: int, line: int, column: int) -> None:
        """Members are anchored at their name token, 1-based."""
        member = _extract(TS_POSITIONS)[0].members[index]

        assert (member.line, member.column) == (line, column)

    def test_unnamed_member_anchored_at_first_token(self) -> None:
        """Members without a name are anchored at their first token."""
        member = _extract(TS_ABSTRACT_CLASS)[0].members[0]

        assert (member.line, member.column) == (3, 5)

    @pytest.mark.parametrize(
        ("index", "line", "column"),
        [(0, 3, 5), (2, 4, 17)],
        ids=["leading", "after_method_body"],
    )
    def test_empty_class_element_position(
        self, index: int, line: int, column: int
    ) -> None:
        """An empty class element is anchored at its semicolon."""
        member = _extract(TS_EMPTY_ELEMENTS)[0].members[index]

        assert (member.line, member.column) == (line, column)
