"""Conversion errors. Every error is fatal and aborts the whole conversion."""


class LmtConversionError(ValueError):
    """Base class for all errors raised while building an LMT."""

    def __init__(self, message: str, *, node_id: str | None = None) -> None:
        super().__init__(message)
        self.node_id = node_id


class MissingRootElement(LmtConversionError):
    """The expected top-level collection is absent from the document."""

    def __init__(self, element: str) -> None:
        super().__init__(f"XML root element {element} not found. Giving up")
        self.element = element


class MissingRequiredElement(LmtConversionError):
    """termID, termName, termNote (or a relation's type/weight) is absent on a node."""

    def __init__(self, element: str, node_id: str | None = None) -> None:
        where = f" in termID {node_id}" if node_id is not None else ""
        super().__init__(f"MESA XML required element {element} not found{where}. Giving up", node_id=node_id)
        self.element = element


class UnknownNoteLabel(LmtConversionError):
    """A termNote carries a label outside the known enumeration."""

    def __init__(self, label: str | None, node_id: str) -> None:
        super().__init__(
            f"MESA XML unknown termNote with label={label} in termID {node_id}. Giving up",
            node_id=node_id,
        )
        self.label = label


class AmbiguousOrInvalidNode(LmtConversionError):
    """A node is neither a usable term nor a recognizable group."""

    def __init__(self, node_id: str, prop: str | None = None, message: str | None = None) -> None:
        if message is None:
            if prop is not None:
                message = f"MESA XML did not set term property {prop} in termID {node_id}. Giving up"
            else:
                message = f"MESA XML has something weird going on in termID {node_id}. Neither group nor term. Giving up"
        super().__init__(message, node_id=node_id)
        self.prop = prop


class NestedGroupNotSupported(AmbiguousOrInvalidNode):
    """A relation of a group carries group notes itself."""

    def __init__(self, node_id: str, parent_id: str) -> None:
        super().__init__(
            node_id,
            message=(
                f"MESA XML relation termID {node_id} of group termID {parent_id} is itself a group. "
                "Nested groups are not supported. Giving up"
            ),
        )
        self.parent_id = parent_id


class DuplicateTagMapping(LmtConversionError):
    """Two nodes attempt to register the same tag."""

    def __init__(self, tag: str, node_id: str, existing_id: str) -> None:
        super().__init__(
            f"MESA XML has a duplicate unique term tag {tag} in termID {node_id} "
            f"(already mapped to termID {existing_id}). Giving up",
            node_id=node_id,
        )
        self.tag = tag
        self.existing_id = existing_id
