"""Classes and instances of the object model."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Iterator

__all__ = [
    "MemberKind",
    "Member",
    "BerryClass",
    "Instance",
    "UNDEFINED",
    "is_derived",
]


class _Undefined:
    """Marker returned by ``member``/``setmember`` hooks for unknown names."""

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"


UNDEFINED = _Undefined()


class MemberKind(enum.Enum):
    """What a class member holds."""

    VARIABLE = "variable"
    METHOD = "method"
    STATIC = "static"


@dataclass
class Member:
    """A class member: an instance-variable slot, a method or a static value."""

    kind: MemberKind
    value: Any = None
    is_static: bool = False


def _default_init(self: "Instance", *args: Any) -> None:
    """Constructor used when a class defines no ``init``."""
    return None


class BerryClass:
    """A class: named members and an optional superclass."""

    def __init__(self, name: str | None = None, superclass: "BerryClass | None" = None):
        self.name = name
        self.superclass = superclass
        self.members: dict[str, Member] = {}
        self.nvar = 0

    def __repr__(self) -> str:
        return f"<class: {self.name}>"

    def _chain(self) -> Iterator["BerryClass"]:
        cls: BerryClass | None = self
        while cls is not None:
            yield cls
            cls = cls.superclass

    def _find(self, name: str) -> tuple["BerryClass | None", Member | None]:
        for cls in self._chain():
            found = cls.members.get(name)
            if found is not None:
                return cls, found
        return None, None

    def bind_member(self, name: str, is_var: bool = True) -> None:
        """Declare an instance variable, or a static member set to nil."""
        if is_var:
            self.members[name] = Member(MemberKind.VARIABLE, self.nvar)
            self.nvar += 1
        else:
            self.members[name] = Member(MemberKind.STATIC, None)

    def bind_method(self, name: str, function: Callable, is_static: bool = False) -> None:
        """Bind *function* as a method; it receives the instance first."""
        if not callable(function):
            raise TypeError("method must be callable")
        self.members[name] = Member(MemberKind.METHOD, function, is_static)

    def attribute(self, name: str) -> MemberKind | None:
        """Return the kind of *name* in this class or a superclass, or None."""
        _, found = self._find(name)
        return found.kind if found is not None else None

    def member(self, name: str) -> Any:
        """Return the value of class member *name*.

        Instance variables have no value at class level and give None.
        Raises AttributeError if the name is unknown.
        """
        _, found = self._find(name)
        if found is None:
            raise AttributeError(f"class '{self.name}' has no member '{name}'")
        if found.kind is MemberKind.VARIABLE:
            return None
        return found.value

    def set_member(self, name: str, value: Any) -> None:
        """Replace a static member or method in the class that defines it."""
        owner, found = self._find(name)
        if owner is None or found is None or found.kind is MemberKind.VARIABLE:
            raise AttributeError(f"cannot set member '{name}' of class '{self.name}'")
        owner.members[name] = Member(MemberKind.STATIC, value)

    def closure_count(self) -> int:
        """Return the number of methods bound to this class itself."""
        return sum(1 for m in self.members.values() if m.kind is MemberKind.METHOD)

    def new_instance(self, *args: Any) -> "Instance":
        """Create an instance, then call its ``init`` with *args*."""
        instance = Instance(self)
        init = instance.member("init")
        if callable(init):
            init(instance, *args)
        return instance


class Instance:
    """An object: one slot table per class in its hierarchy."""

    def __init__(self, cls: BerryClass, sub_instance: "Instance | None" = None):
        self.cls = cls
        self.values: list[Any] = [None] * cls.nvar
        self.sub_instance = sub_instance
        self.super_instance = (
            Instance(cls.superclass, self) if cls.superclass is not None else None
        )

    def __repr__(self) -> str:
        return f"<instance: {self.cls.name}()>"

    def _levels(self) -> Iterator["Instance"]:
        inst: Instance | None = self
        while inst is not None:
            yield inst
            inst = inst.super_instance

    def _find(self, name: str) -> tuple["Instance | None", Member | None]:
        for inst in self._levels():
            found = inst.cls.members.get(name)
            if found is not None:
                return inst, found
        return None, None

    def _resolve(self, name: str) -> tuple[bool, Any]:
        level, found = self._find(name)
        if level is None or found is None:
            return False, None
        if found.kind is MemberKind.VARIABLE:
            return True, level.values[found.value]
        return True, found.value

    def member(self, name: str) -> Any:
        """Return member *name*: a variable's value or the method itself.

        Unknown names go to the ``member`` method if there is one; a
        missing ``init`` yields a no-op constructor. Raises AttributeError
        if the name cannot be resolved.
        """
        ok, value = self._resolve(name)
        if ok:
            return value
        if name == "init":
            return _default_init
        _, hook = self._find("member")
        if hook is not None and hook.kind is not MemberKind.VARIABLE and callable(hook.value):
            result = hook.value(self, name)
            if result is UNDEFINED:
                raise AttributeError(f"'{self.cls.name}' has no member '{name}'")
            return result
        raise AttributeError(f"'{self.cls.name}' has no member '{name}'")

    def set_member(self, name: str, value: Any) -> None:
        """Set instance variable *name*, or defer to a ``setmember`` method.

        Raises AttributeError if the name is not a variable and no
        ``setmember`` accepts it.
        """
        level, found = self._find(name)
        if level is not None and found is not None and found.kind is MemberKind.VARIABLE:
            level.values[found.value] = value
            return
        ok, hook = self._resolve("setmember")
        if ok and callable(hook):
            result = hook(self, name, value)
            if result is False or result is UNDEFINED:
                raise AttributeError(f"cannot set member '{name}' of '{self.cls.name}'")
            return
        raise AttributeError(f"cannot set member '{name}' of '{self.cls.name}'")

    def class_chain(self) -> list[BerryClass]:
        """Return the instance's class followed by its superclasses."""
        return [inst.cls for inst in self._levels()]


def _class_of(value: Any) -> BerryClass | None:
    if isinstance(value, Instance):
        return value.cls
    if isinstance(value, BerryClass):
        return value
    return None


def is_derived(value: Any, base: Any) -> bool:
    """Return True if *value* (class or instance) derives from *base*."""
    target = _class_of(base)
    if target is None:
        return False
    cls = _class_of(value)
    while cls is not None and cls is not target:
        cls = cls.superclass
    return cls is not None