"""Data models for class members, violations and findings."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

MemberKind = Literal[
    "property",
    "getter",
    "setter",
    "constructor",
    "method",
    "index_signature",
    "static_block",
    "semicolon",
]


class DecoratorModel(BaseModel):
    """A decorator applied to a class member."""

    model_config = ConfigDict(frozen=True)

    name: str
    arguments: tuple[str, ...] = ()  # raw argument text, quotes included

    @property
    def first_argument(self) -> str | None:
        """Return the text of the first call argument, if any."""
        return self.arguments[0] if self.arguments else None


class MemberModel(BaseModel):
    """A direct member of a class body."""

    model_config = ConfigDict(frozen=True)

    kind: MemberKind
    name: str | None = None
    decorators: tuple[DecoratorModel, ...] = ()
    is_static: bool = False
    line: int = 1
    column: int = 1

    def get_decorator(self, name: str) -> DecoratorModel | None:
        """Return the first decorator with exactly this name."""
        for decorator in self.decorators:
            if decorator.name == name:
                return decorator
        return None

    def has_decorator(self, name: str) -> bool:
        """Check whether the member carries a decorator with this name."""
        return self.get_decorator(name) is not None


class ClassDeclarationModel(BaseModel):
    """A class declaration with its members in source order."""

    model_config = ConfigDict(frozen=True)

    name: str
    line: int
    members: tuple[MemberModel, ...] = ()


class ViolationModel(BaseModel):
    """A member declared after a member that should follow it."""

    model_config = ConfigDict(frozen=True)

    member: MemberModel
    category: str
    index: int
    previous_category: str


class FindingModel(BaseModel):
    """A reportable member order violation anchored in a source file."""

    model_config = ConfigDict(frozen=True)

    rule: str
    file_path: str
    class_name: str
    member_name: str | None
    category: str
    previous_category: str
    line: int
    column: int
    message: str
