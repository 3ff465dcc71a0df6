"""Value objects: immutable and compared by their attributes."""


class ValueObject:
    """
    Mixin for frozen dataclasses that have no identity of their own.

    Subclasses validate themselves in ``__post_init__``; two instances with
    the same fields are interchangeable.
    """

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and vars(self) == vars(other)

    def __hash__(self) -> int:
        return hash((type(self).__name__, *vars(self).values()))

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in vars(self).items())
        return f"{type(self).__name__}({fields})"
