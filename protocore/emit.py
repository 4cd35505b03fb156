"""Build a small syntax tree of C-like code and print it as source text.

Nodes are created with the helper functions (``iden``, ``decl``,
``function_def`` and so on) and turned into text with :func:`emit` or
:func:`emit_code`. Formatting decisions such as spacing, braces and
indentation live in :class:`CodeStream`, separate from the tree logic.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Union

__all__ = [
    "NodeType",
    "Operator",
    "Qualifier",
    "Node",
    "CodeStream",
    "emit",
    "emit_code",
    "add_kid",
    "set_qualifiers",
    "node_list",
    "block",
    "add",
    "iden",
    "decl",
    "assign",
    "access",
    "function_def",
    "ret",
    "unary",
    "binary",
    "construct",
    "function_call",
    "struct_def",
    "constructor_def",
    "scope",
    "cast",
    "pragma_directive",
    "include_header",
    "include_source",
    "pointer",
    "paren_surround",
    "index",
]


class NodeType(enum.Enum):
    """What a node stands for."""

    EMPTY = 0
    STRUCT_DEF = 1
    FUNCTION_DEF = 2
    CONSTRUCTOR_DEF = 3
    FUNCTION_CALL = 4
    BLOCK = 5
    LIST = 6
    CONSTRUCTOR = 7
    DECLARATION = 8
    ASSIGNMENT = 9
    ACCESS = 10
    INDEX = 11
    SCOPE = 12
    CAST = 13
    PAREN_SURROUND = 14
    POINTER = 15
    UNARY_OPERATOR = 16
    BINARY_OPERATOR = 17
    TERNARY_OPERATOR = 18
    RETURN = 19
    LITERAL = 20
    IDENTIFIER = 21
    PRAGMA = 22
    INCLUDE_HEADER = 23
    INCLUDE_SOURCE = 24


class Operator(enum.Enum):
    """Operators of unary, binary and compound-assignment nodes."""

    NONE = 0
    ADD = 1
    SUBTRACT = 2
    MULTIPLY = 3
    DIVIDE = 4
    MODULO = 5
    NEGATE = 6
    EQUAL = 7
    NOT_EQUAL = 8
    GREATER = 9
    GREATER_OR_EQUAL = 10
    LESS = 11
    LESS_OR_EQUAL = 12
    LOGICAL_AND = 13
    LOGICAL_OR = 14
    LOGICAL_NOT = 15
    BITWISE_AND = 16
    BITWISE_OR = 17
    BITWISE_XOR = 18
    BITWISE_NOT = 19
    BITWISE_SHIFT_LEFT = 20
    BITWISE_SHIFT_RIGHT = 21

    @property
    def symbol(self) -> str:
        try:
            return _OPERATOR_SYMBOLS[self]
        except KeyError:
            raise ValueError("Operator.NONE has no symbol") from None


_OPERATOR_SYMBOLS: Dict[Operator, str] = {
    Operator.ADD: "+",
    Operator.SUBTRACT: "-",
    Operator.MULTIPLY: "*",
    Operator.DIVIDE: "/",
    Operator.MODULO: "%",
    Operator.NEGATE: "-",
    Operator.EQUAL: "==",
    Operator.NOT_EQUAL: "!=",
    Operator.GREATER: ">",
    Operator.GREATER_OR_EQUAL: ">=",
    Operator.LESS: "<",
    Operator.LESS_OR_EQUAL: "<=",
    Operator.LOGICAL_AND: "&&",
    Operator.LOGICAL_OR: "||",
    Operator.LOGICAL_NOT: "!",
    Operator.BITWISE_AND: "&",
    Operator.BITWISE_OR: "|",
    Operator.BITWISE_XOR: "^",
    Operator.BITWISE_NOT: "~",
    Operator.BITWISE_SHIFT_LEFT: "<<",
    Operator.BITWISE_SHIFT_RIGHT: ">>",
}


class Qualifier(enum.IntFlag):
    """Qualifier flags that may be set on identifiers and definitions."""

    NONE = 0
    CONST = 1 << 0
    STATIC = 1 << 1
    EXPLICIT = 1 << 2
    INLINE = 1 << 3
    VOLATILE = 1 << 4
    MUTABLE = 1 << 5
    REFERENCE = 1 << 6


# Volatile is declared but never recorded by set_qualifiers.
_SETTABLE = (
    Qualifier.CONST
    | Qualifier.STATIC
    | Qualifier.EXPLICIT
    | Qualifier.INLINE
    | Qualifier.MUTABLE
    | Qualifier.REFERENCE
)


@dataclass(eq=False)
class Node:
    """One tree node: its kind, optional operator or text, and ordered children."""

    type: NodeType
    op: Operator = Operator.NONE
    identifier: Optional[str] = None
    kids: List["Node"] = field(default_factory=list)
    qualifiers: Qualifier = Qualifier.NONE

    def _has(self, flag: Qualifier) -> bool:
        return bool(self.qualifiers & flag)

    @property
    def is_const(self) -> bool:
        return self._has(Qualifier.CONST)

    @property
    def is_static(self) -> bool:
        return self._has(Qualifier.STATIC)

    @property
    def is_explicit(self) -> bool:
        return self._has(Qualifier.EXPLICIT)

    @property
    def is_inline(self) -> bool:
        return self._has(Qualifier.INLINE)

    @property
    def is_mutable(self) -> bool:
        return self._has(Qualifier.MUTABLE)

    @property
    def is_reference(self) -> bool:
        return self._has(Qualifier.REFERENCE)


class CodeStream:
    """Accumulates emitted text together with the current indentation level."""

    def __init__(self):
        self._parts: List[str] = []
        self.indent_level = 0

    def write(self, text: str) -> None:
        self._parts.append(text)

    def indent(self, inward: bool) -> None:
        """Increase the indentation by one level, or decrease it."""
        level = self.indent_level + (1 if inward else -1)
        if level < 0:
            raise ValueError("indentation level cannot go below zero")
        self.indent_level = level

    def newline(self) -> None:
        """Start a new line at the current indentation."""
        self.write("\n" + "\t" * self.indent_level)

    def op(self, operator: Operator) -> None:
        self.write(Operator(operator).symbol)

    def assign(self, operator: Operator = Operator.NONE) -> None:
        """Write ``=``, preceded by the operator of a compound assignment."""
        operator = Operator(operator)
        if operator is not Operator.NONE:
            self.op(operator)
        self.write("=")

    def getvalue(self) -> str:
        return "".join(self._parts)

    def byte_size(self) -> int:
        return len(self.getvalue().encode("utf-8"))


# tree construction


NodeLike = Union[Node, str]


def _as_node(value: NodeLike) -> Node:
    if isinstance(value, Node):
        return value
    if isinstance(value, str):
        return iden(value)
    raise TypeError(f"expected a Node or an identifier string, got {type(value).__name__}")


def _require(value, what: str) -> Node:
    if value is None:
        raise ValueError(f"{what} is required")
    return _as_node(value)


def _make(node_type: NodeType, *kids: Optional[Node], **fields) -> Node:
    node = Node(node_type, **fields)
    for kid in kids:
        add_kid(node, kid)
    return node


def add_kid(par: Node, kid: Optional[Node]) -> None:
    """Append ``kid`` as the last child of ``par``; ``None`` adds nothing."""
    if kid is None:
        return
    if not isinstance(kid, Node):
        raise TypeError(f"expected a Node, got {type(kid).__name__}")
    par.kids.append(kid)


def set_qualifiers(who: Node, qualifiers) -> None:
    """Add qualifier flags to a node (volatile is not recorded)."""
    who.qualifiers |= Qualifier(int(qualifiers)) & _SETTABLE


def node_list(*args: NodeLike) -> Node:
    """A comma-separated list of the given nodes."""
    return _make(NodeType.LIST, *(_as_node(a) for a in args))


def block(*args: NodeLike) -> Node:
    """A sequence of statements, one per line."""
    return _make(NodeType.BLOCK, *(_as_node(a) for a in args))


def add(list_or_block: Node, who: NodeLike) -> None:
    """Append an item to a list or block."""
    add_kid(list_or_block, _as_node(who))


def iden(name: str, qualifiers=0) -> Node:
    node = Node(NodeType.IDENTIFIER, identifier=name)
    set_qualifiers(node, qualifiers)
    return node


def decl(type_: NodeLike, name: NodeLike) -> Node:
    return _make(NodeType.DECLARATION, _require(type_, "type"), _require(name, "name"))


def assign(lhs: NodeLike, rhs: NodeLike, op: Operator = Operator.NONE) -> Node:
    """Assignment; a non-NONE ``op`` makes it a compound assignment."""
    return _make(
        NodeType.ASSIGNMENT,
        _require(lhs, "left-hand side"),
        _require(rhs, "right-hand side"),
        op=Operator(op),
    )


def access(name: NodeLike, member: NodeLike) -> Node:
    return _make(NodeType.ACCESS, _require(name, "name"), _require(member, "member"))


def function_def(
    return_type: NodeLike,
    name: NodeLike,
    argument_list: Node,
    body_block: Optional[Node] = None,
    qualifiers=0,
) -> Node:
    """A function definition, or a declaration when ``body_block`` is None."""
    node = _make(
        NodeType.FUNCTION_DEF,
        _require(return_type, "return type"),
        _require(name, "name"),
        _require(argument_list, "argument list"),
        body_block,
    )
    set_qualifiers(node, qualifiers)
    return node


def ret(what: NodeLike) -> Node:
    return _make(NodeType.RETURN, _require(what, "return value"))


def unary(op: Operator, rhs: NodeLike) -> Node:
    return _make(NodeType.UNARY_OPERATOR, _require(rhs, "operand"), op=Operator(op))


def binary(lhs: NodeLike, op: Operator, rhs: NodeLike) -> Node:
    return _make(
        NodeType.BINARY_OPERATOR,
        _require(lhs, "left operand"),
        _require(rhs, "right operand"),
        op=Operator(op),
    )


def construct(type_: NodeLike, argument_list: Node) -> Node:
    return _make(
        NodeType.CONSTRUCTOR,
        _require(type_, "type"),
        _require(argument_list, "argument list"),
    )


def function_call(target: NodeLike, argument_list: Node) -> Node:
    return _make(
        NodeType.FUNCTION_CALL,
        _require(target, "callee"),
        _require(argument_list, "argument list"),
    )


def struct_def(name: NodeLike, body_block: Optional[Node] = None) -> Node:
    """A struct definition, or a forward declaration when the body is None."""
    return _make(NodeType.STRUCT_DEF, _require(name, "name"), body_block)


def constructor_def(
    name: NodeLike,
    argument_list: Node,
    init_list: Node,
    body_block: Optional[Node] = None,
    qualifiers=0,
) -> Node:
    node = _make(
        NodeType.CONSTRUCTOR_DEF,
        _require(name, "name"),
        _require(argument_list, "argument list"),
        _require(init_list, "initializer list"),
        body_block,
    )
    set_qualifiers(node, qualifiers)
    return node


def scope(par: NodeLike, kid: NodeLike) -> Node:
    return _make(NodeType.SCOPE, _require(par, "scope"), _require(kid, "member"))


def cast(to: NodeLike, frm: NodeLike) -> Node:
    return _make(NodeType.CAST, _require(to, "target type"), _require(frm, "operand"))


def pragma_directive(text: str) -> Node:
    return Node(NodeType.PRAGMA, identifier=text)


def include_header(text: str) -> Node:
    return Node(NodeType.INCLUDE_HEADER, identifier=text)


def include_source(text: str) -> Node:
    return Node(NodeType.INCLUDE_SOURCE, identifier=text)


def pointer(type_: NodeLike) -> Node:
    return _make(NodeType.POINTER, _require(type_, "type"))


def paren_surround(what: NodeLike) -> Node:
    return _make(NodeType.PAREN_SURROUND, _require(what, "expression"))


def index(name: NodeLike, idx: NodeLike) -> Node:
    return _make(NodeType.INDEX, _require(name, "name"), _require(idx, "index"))


# emission


def _kid(node: Node, i: int) -> Node:
    try:
        return node.kids[i]
    except IndexError:
        raise ValueError(f"{node.type.name} node is missing child {i}") from None


def _optional_kid(node: Node, i: int) -> Optional[Node]:
    return node.kids[i] if i < len(node.kids) else None


def _emit_body(cod: CodeStream, body: Node) -> None:
    cod.write(" {")
    if body.kids:
        cod.indent(True)
        cod.newline()
        emit(cod, body)
        cod.indent(False)
        cod.newline()
    cod.write("}")


def _emit_struct_def(cod: CodeStream, who: Node) -> None:
    cod.write("struct ")
    emit(cod, _kid(who, 0))
    body = _optional_kid(who, 1)
    if body is not None:
        cod.write(" {")
        cod.indent(True)
        cod.newline()
        emit(cod, body)
        cod.indent(False)
        cod.newline()
        cod.write("}")


def _emit_function_def(cod: CodeStream, who: Node) -> None:
    if who.is_static:
        cod.write("static ")
    if who.is_explicit:
        cod.write("explicit ")
    if who.is_inline:
        cod.write("inline ")
    emit(cod, _kid(who, 0))
    cod.write(" ")
    emit(cod, _kid(who, 1))
    cod.write("(")
    emit(cod, _kid(who, 2))
    cod.write(")")
    if who.is_const:
        cod.write(" const")
    body = _optional_kid(who, 3)
    if body is not None:
        _emit_body(cod, body)


def _emit_constructor_def(cod: CodeStream, who: Node) -> None:
    if who.is_explicit:
        cod.write("explicit ")
    if who.is_inline:
        cod.write("inline ")
    emit(cod, _kid(who, 0))
    cod.write("(")
    emit(cod, _kid(who, 1))
    cod.write(")")
    init_list = _kid(who, 2)
    if init_list.kids:
        cod.write(":")
        emit(cod, init_list)
    body = _optional_kid(who, 3)
    if body is not None:
        _emit_body(cod, body)


def _call_like(cod: CodeStream, who: Node) -> None:
    emit(cod, _kid(who, 0))
    cod.write("(")
    emit(cod, _kid(who, 1))
    cod.write(")")


_NO_SEMICOLON = frozenset(
    {NodeType.BLOCK, NodeType.PRAGMA, NodeType.INCLUDE_HEADER, NodeType.INCLUDE_SOURCE}
)


def _needs_semicolon(kid: Node) -> bool:
    if kid.type in (NodeType.FUNCTION_DEF, NodeType.CONSTRUCTOR_DEF):
        return len(kid.kids) < 4
    return kid.type not in _NO_SEMICOLON


def _emit_block(cod: CodeStream, who: Node) -> None:
    for i, kid in enumerate(who.kids):
        if i:
            cod.newline()
        emit(cod, kid)
        if _needs_semicolon(kid):
            cod.write(";")


def _emit_list(cod: CodeStream, who: Node) -> None:
    for i, kid in enumerate(who.kids):
        if i:
            cod.write(", ")
        emit(cod, kid)


def _infix(separator: str) -> Callable[[CodeStream, Node], None]:
    def emitter(cod: CodeStream, who: Node) -> None:
        emit(cod, _kid(who, 0))
        cod.write(separator)
        emit(cod, _kid(who, 1))

    return emitter


def _emit_assignment(cod: CodeStream, who: Node) -> None:
    emit(cod, _kid(who, 0))
    cod.assign(who.op)
    emit(cod, _kid(who, 1))


def _emit_index(cod: CodeStream, who: Node) -> None:
    emit(cod, _kid(who, 0))
    cod.write("[")
    emit(cod, _kid(who, 1))
    cod.write("]")


def _emit_cast(cod: CodeStream, who: Node) -> None:
    cod.write("(")
    emit(cod, _kid(who, 0))
    cod.write(")")
    emit(cod, _kid(who, 1))


def _emit_paren_surround(cod: CodeStream, who: Node) -> None:
    cod.write("(")
    emit(cod, _kid(who, 0))
    cod.write(")")


def _emit_pointer(cod: CodeStream, who: Node) -> None:
    emit(cod, _kid(who, 0))
    cod.write("*")


def _emit_unary(cod: CodeStream, who: Node) -> None:
    cod.op(who.op)
    emit(cod, _kid(who, 0))


def _emit_binary(cod: CodeStream, who: Node) -> None:
    emit(cod, _kid(who, 0))
    cod.op(who.op)
    emit(cod, _kid(who, 1))


def _emit_ternary(cod: CodeStream, who: Node) -> None:
    """Write ``a?b:c`` for a node with three children; otherwise nothing."""
    if len(who.kids) != 3:
        return
    condition, when_true, when_false = who.kids
    emit(cod, condition)
    cod.write("?")
    emit(cod, when_true)
    cod.write(":")
    emit(cod, when_false)


def _emit_literal(cod: CodeStream, who: Node) -> None:
    """Write the literal's text, if it carries any."""
    if who.identifier:
        cod.write(who.identifier)


def _emit_return(cod: CodeStream, who: Node) -> None:
    cod.write("return ")
    emit(cod, _kid(who, 0))


def _text(who: Node) -> str:
    if who.identifier is None:
        raise ValueError(f"{who.type.name} node has no text")
    return who.identifier


def _emit_identifier(cod: CodeStream, who: Node) -> None:
    if who.is_const:
        cod.write("const ")
    cod.write(_text(who))
    if who.is_reference:
        cod.write("&")


def _emit_pragma(cod: CodeStream, who: Node) -> None:
    cod.write("#pragma ")
    cod.write(_text(who))


def _emit_include_header(cod: CodeStream, who: Node) -> None:
    cod.write("#include <")
    cod.write(_text(who))
    cod.write(">")


def _emit_include_source(cod: CodeStream, who: Node) -> None:
    cod.write('#include "')
    cod.write(_text(who))
    cod.write('"')


_EMITTERS: Dict[NodeType, Callable[[CodeStream, Node], None]] = {
    NodeType.STRUCT_DEF: _emit_struct_def,
    NodeType.FUNCTION_DEF: _emit_function_def,
    NodeType.CONSTRUCTOR_DEF: _emit_constructor_def,
    NodeType.FUNCTION_CALL: _call_like,
    NodeType.BLOCK: _emit_block,
    NodeType.LIST: _emit_list,
    NodeType.CONSTRUCTOR: _call_like,
    NodeType.DECLARATION: _infix(" "),
    NodeType.ASSIGNMENT: _emit_assignment,
    NodeType.ACCESS: _infix("."),
    NodeType.INDEX: _emit_index,
    NodeType.SCOPE: _infix("::"),
    NodeType.CAST: _emit_cast,
    NodeType.PAREN_SURROUND: _emit_paren_surround,
    NodeType.POINTER: _emit_pointer,
    NodeType.UNARY_OPERATOR: _emit_unary,
    NodeType.BINARY_OPERATOR: _emit_binary,
    NodeType.TERNARY_OPERATOR: _emit_ternary,
    NodeType.RETURN: _emit_return,
    NodeType.LITERAL: _emit_literal,
    NodeType.PRAGMA: _emit_pragma,
    NodeType.INCLUDE_HEADER: _emit_include_header,
    NodeType.INCLUDE_SOURCE: _emit_include_source,
    NodeType.IDENTIFIER: _emit_identifier,
}


def emit(stream: CodeStream, node: Node) -> None:
    """Write the source text of ``node`` to ``stream``."""
    if not isinstance(node, Node):
        raise TypeError(f"expected a Node, got {type(node).__name__}")
    emitter = _EMITTERS.get(node.type)
    if emitter is None:
        raise ValueError(f"cannot emit a node of type {node.type.name}")
    emitter(stream, node)


def emit_code(node: Node) -> str:
    """The source text of ``node`` as a string."""
    stream = CodeStream()
    emit(stream, node)
    return stream.getvalue()