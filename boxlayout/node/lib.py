"""Layout node model.

Nodes are pydantic models describing one rectangle of the layout tree. The
variants form a closed set discriminated by `kind`:

- Container: plain box
- Image: box painted with an image
- Text: box painted with a block of text
- FlexContainer: box that distributes its children along a main axis

Parents own their children. The back-reference from child to parent is a
`weakref.ref`, so it never keeps a detached parent alive.
"""

import weakref
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Annotated, Any, Literal, Protocol, runtime_checkable
from uuid import uuid4

from pydantic import (
    BaseModel,
    Field,
    PrivateAttr,
    SerializeAsAny,
    field_validator,
    model_validator,
)

from boxlayout.config import EnvVar, get_environment
from boxlayout.core.errors import ConfigurationError, LayoutNotComputedError
from boxlayout.schema import (
    AlignItems,
    FlexDirection,
    HorizontalAlign,
    ImageFit,
    JustifyContent,
    MeasurementMode,
    NodeKind,
    Rect,
    TextAlign,
    VerticalAlign,
    parse_position,
    parse_size,
)


@runtime_checkable
class Measurable(Protocol):
    """Capability required by the flex distributor to size a child."""

    @property
    def requested_width(self) -> float: ...

    @property
    def requested_height(self) -> float: ...

    @property
    def measurement_mode(self) -> MeasurementMode: ...


def _accept_center_alias(value: Any) -> Any:
    if isinstance(value, str) and value.lower() == "center":
        return VerticalAlign.MIDDLE
    return value


class LayoutNode(BaseModel):
    """Base node of the layout tree.

    Attributes:
        id: Identifier used in logs and validation reports.
        kind: Variant tag.
        measurement_mode: Whether geometry is in pixels or fractions.
        x: Horizontal position (pixels or fraction).
        y: Vertical position (pixels or fraction).
        width: Width (pixels, or fraction in [0, 1]).
        height: Height (pixels, or fraction in [0, 1]).
        padding: Inset applied to proportional children, in pixels.
        margin: Outer inset in pixels.
        border_width: Border stroke width; 0 disables the border.
        border_color: Border stroke color.
        children: Owned child nodes, in paint order.
    """

    # Identity
    id: str = Field(
        default_factory=lambda: uuid4().hex,
        description="Identifier for logs and validation reports",
    )
    kind: NodeKind = Field(..., description="Variant tag")

    # Geometry
    measurement_mode: MeasurementMode = Field(
        default=MeasurementMode.PROPORTIONAL,
        description="Absolute pixels or parent-relative fractions",
    )
    x: float = Field(default=0.0, description="Horizontal position")
    y: float = Field(default=0.0, description="Vertical position")
    width: float = Field(default=1.0, description="Width in pixels or fraction")
    height: float = Field(default=1.0, description="Height in pixels or fraction")
    padding: Annotated[float, Field(ge=0)] = Field(
        default=0.0,
        description="Inset applied to proportional children",
    )
    margin: Annotated[float, Field(ge=0)] = Field(
        default=0.0,
        description="Outer inset",
    )

    # Border
    border_width: Annotated[float, Field(ge=0)] = Field(
        default_factory=lambda: get_environment(EnvVar.BOXLAYOUT_BORDER_WIDTH),
        description="Border stroke width (0 disables the border)",
    )
    border_color: str = Field(
        default_factory=lambda: get_environment(EnvVar.BOXLAYOUT_BORDER_COLOR),
        description="Border stroke color",
    )

    # Structure
    children: "list[SerializeAsAny[LayoutNode]]" = Field(
        default_factory=list,
        description="Owned child nodes in paint order",
    )

    _parent: weakref.ReferenceType | None = PrivateAttr(default=None)

    model_config = {
        "use_enum_values": True,
    }

    @model_validator(mode="before")
    @classmethod
    def parse_geometry(cls, data: Any) -> Any:
        """Convert position and size inputs to floats for the node's mode."""
        if not isinstance(data, dict):
            return data
        try:
            mode = MeasurementMode(
                data.get("measurement_mode", MeasurementMode.PROPORTIONAL)
            )
        except ValueError:
            # Left for the field validator to report
            return data

        data = dict(data)
        for name in ("x", "y"):
            if name in data:
                data[name] = parse_position(data[name], mode, name)
        for name in ("width", "height"):
            if name in data:
                data[name] = parse_size(data[name], mode, name)
        return data

    def model_post_init(self, __context: Any) -> None:
        for child in self.children:
            self._claim(child)

    # Nodes are entities: identity equality, identity hashing
    def __eq__(self, other: object) -> bool:
        return self is other

    __hash__ = object.__hash__

    @property
    def parent(self) -> "LayoutNode | None":
        """Owning node, or None for a root or a detached parent."""
        return self._parent() if self._parent is not None else None

    @property
    def requested_width(self) -> float:
        return self.width

    @property
    def requested_height(self) -> float:
        return self.height

    @property
    def is_absolute(self) -> bool:
        return self.measurement_mode == MeasurementMode.ABSOLUTE

    def add_child(self, node: "LayoutNode") -> None:
        """Attach a node as the last child.

        Raises:
            ConfigurationError: If the node already has a parent, or is this
                node or one of its ancestors.
        """
        if any(child is node for child in self.children):
            raise ConfigurationError(
                f"Node '{node.id}' is already a child of '{self.id}'",
                node_id=node.id,
            )
        self._claim(node)
        self.children.append(node)

    def add_children(self, *nodes: "LayoutNode") -> None:
        """Attach several nodes in order."""
        for node in nodes:
            self.add_child(node)

    def _claim(self, node: "LayoutNode") -> None:
        ancestor: LayoutNode | None = self
        while ancestor is not None:
            if ancestor is node:
                raise ConfigurationError(
                    f"Node '{node.id}' cannot be attached beneath itself",
                    node_id=node.id,
                )
            ancestor = ancestor.parent

        owner = node.parent
        if owner is not None and owner is not self:
            raise ConfigurationError(
                f"Node '{node.id}' already belongs to '{owner.id}'",
                node_id=node.id,
            )
        node._parent = weakref.ref(self)


class Container(LayoutNode):
    """Plain rectangular box."""

    kind: Literal[NodeKind.CONTAINER] = NodeKind.CONTAINER


class Image(LayoutNode):
    """Box painted with an image.

    Attributes:
        source: Path or URL handed to the canvas.
        fit: Scaling mode into the resolved rectangle.
        align: Optional horizontal placement hint.
        vertical_align: Optional vertical placement hint.
    """

    kind: Literal[NodeKind.IMAGE] = NodeKind.IMAGE
    source: str = Field(..., description="Image path or URL")
    fit: ImageFit = Field(default=ImageFit.CONTAIN, description="contain or cover")
    align: HorizontalAlign | None = Field(
        default=None, description="Horizontal placement hint"
    )
    vertical_align: VerticalAlign | None = Field(
        default=None, description="Vertical placement hint"
    )

    @field_validator("vertical_align", mode="before")
    @classmethod
    def accept_center_alias(cls, value: Any) -> Any:
        return _accept_center_alias(value)


class Text(LayoutNode):
    """Box painted with a block of text.

    Attributes:
        content: Text to draw.
        font_size: Font size in points.
        color: Fill color.
        align: Horizontal alignment inside the block.
        vertical_align: Anchor of the block inside the box.
    """

    kind: Literal[NodeKind.TEXT] = NodeKind.TEXT
    content: str = Field(..., description="Text to draw")
    font_size: Annotated[float, Field(gt=0)] = Field(
        default_factory=lambda: get_environment(EnvVar.BOXLAYOUT_FONT_SIZE),
        description="Font size",
    )
    color: str = Field(
        default_factory=lambda: get_environment(EnvVar.BOXLAYOUT_TEXT_COLOR),
        description="Fill color",
    )
    align: TextAlign = Field(default=TextAlign.CENTER, description="Text alignment")
    vertical_align: VerticalAlign = Field(
        default=VerticalAlign.MIDDLE, description="Vertical anchor"
    )

    @field_validator("vertical_align", mode="before")
    @classmethod
    def accept_center_alias(cls, value: Any) -> Any:
        return _accept_center_alias(value)


class FlexContainer(LayoutNode):
    """Box whose children are placed by the flex distributor.

    The layout cache maps each child to the slot assigned by the last
    distribution pass. It is None until the first pass and is replaced
    wholesale on every pass.

    Attributes:
        direction: Main axis.
        justify_content: Main-axis distribution.
        align_items: Cross-axis alignment.
        gap: Spacing between consecutive children in pixels.
    """

    kind: Literal[NodeKind.FLEX_CONTAINER] = NodeKind.FLEX_CONTAINER
    direction: FlexDirection = Field(default=FlexDirection.ROW, description="Main axis")
    justify_content: JustifyContent = Field(
        default=JustifyContent.FLEX_START,
        description="Main-axis distribution",
    )
    align_items: AlignItems = Field(
        default=AlignItems.FLEX_START,
        description="Cross-axis alignment",
    )
    gap: Annotated[float, Field(ge=0)] = Field(
        default=0.0,
        description="Spacing between children in pixels",
    )

    _layout_cache: dict[Any, Rect] | None = PrivateAttr(default=None)

    @property
    def is_distributed(self) -> bool:
        return self._layout_cache is not None

    @property
    def layout_cache(self) -> Mapping[Any, Rect] | None:
        """Read-only view of the slots from the last pass, or None."""
        if self._layout_cache is None:
            return None
        return MappingProxyType(self._layout_cache)

    def slot_for(self, child: Any) -> Rect:
        """Get the slot assigned to a child by the last distribution pass.

        Raises:
            LayoutNotComputedError: If no pass has placed this child.
        """
        if self._layout_cache is None or child not in self._layout_cache:
            child_id = getattr(child, "id", None)
            raise LayoutNotComputedError(
                f"Layout of child '{child_id}' in flex container '{self.id}' "
                "not computed; distribute the container first",
                node_id=child_id,
            )
        return self._layout_cache[child]

    def replace_layout(self, slots: dict[Any, Rect]) -> None:
        """Swap in the slots of a complete distribution pass."""
        self._layout_cache = slots


def walk(node: LayoutNode) -> Iterator[LayoutNode]:
    """Yield a node and its descendants depth-first, in paint order."""
    yield node
    for child in node.children:
        yield from walk(child)


__all__ = [
    "Measurable",
    "LayoutNode",
    "Container",
    "Image",
    "Text",
    "FlexContainer",
    "walk",
]
