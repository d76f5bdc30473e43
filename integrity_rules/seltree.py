"""Selection tree: path rules arranged by directory and matched against file names."""

from __future__ import annotations

import enum
import logging
import threading
from typing import Iterator

import regex

from .rx_rule import (
    Restriction,
    RuleType,
    RxRule,
    restriction_string,
    rule_type_long_string,
)
from .tree import AATree

_log = logging.getLogger(__name__)


class RuleError(ValueError):
    """A rule could not be added to the selection tree."""


class MatchFlag(enum.IntFlag):
    NO_MATCH = 0
    NEGATIVE = 1 << 0
    SELECTIVE = 1 << 1
    EQUAL = 1 << 2
    RESTRICTED = 1 << 3
    PARTIAL = 1 << 4
    DEEP_EQUAL = 1 << 5
    DEEP_SELECTIVE = 1 << 6
    RECURSED_CALL = 1 << 7
    TOP_LEVEL_CALL = 1 << 8
    RULE_MATCH = EQUAL | SELECTIVE


_NEG = int(MatchFlag.NEGATIVE)
_SEL = int(MatchFlag.SELECTIVE)
_EQ = int(MatchFlag.EQUAL)
_RESTRICTED = int(MatchFlag.RESTRICTED)
_PARTIAL = int(MatchFlag.PARTIAL)
_DEEP_EQ = int(MatchFlag.DEEP_EQUAL)
_DEEP_SEL = int(MatchFlag.DEEP_SELECTIVE)
_RECURSED = int(MatchFlag.RECURSED_CALL)
_TOP = int(MatchFlag.TOP_LEVEL_CALL)
_RULE_MATCH = int(MatchFlag.RULE_MATCH)

_RX_SPECIAL = frozenset("(^$?*[")


def _strrxtok(rx: str) -> str:
    """Return the literal directory part in front of the first regex construct."""
    chars = list(rx) or ["/"]
    chars[0] = "/"
    lastslash = 1
    i = 1
    while i < len(chars):
        c = chars[i]
        if c == "/":
            lastslash = i
        elif c in _RX_SPECIAL:
            break
        elif c == "\\":
            # Drop the backslash; the escaped character is then skipped.
            del chars[i]
        i += 1
    return "".join(chars[:lastslash])


def _child_key(path: str) -> str:
    return path[path.rfind("/"):]


def _parent_name(path: str) -> str:
    idx = path.rfind("/")
    return path[:idx] if idx > 0 else "/"


def _require_absolute(path: str) -> None:
    if not path.startswith("/"):
        raise ValueError(f"path must be absolute: '{path}'")


def _rule_line(rule: RxRule, depth: int, marker: str, with_attr: bool) -> str:
    body = f"{marker}{rule.rx} {restriction_string(rule.restriction)}"
    if with_attr:
        body += f" {rule.attr:#x}"
    prefix = f"', prefix: '{rule.prefix}" if rule.prefix is not None else ""
    return (
        f"{'│':<{depth + 2}}  '{body}' "
        f"({rule.config_filename}:{rule.config_linenumber}: '{rule.config_line}{prefix}')"
    )


class SelTree:
    """A directory node holding the rules whose literal path part ends here."""

    def __init__(self, path: str, parent: SelTree | None = None) -> None:
        self.path = path
        self.parent = parent
        self.children = AATree()
        self.sel_rules: list[RxRule] = []
        self.neg_rules: list[RxRule] = []
        self.equ_rules: list[RxRule] = []
        self.checked = 0
        self.new_data = None
        self.old_data = None
        self.changed_attrs = 0
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        return f"SelTree({self.path!r})"

    def _has_rules(self) -> bool:
        return bool(self.equ_rules or self.sel_rules or self.neg_rules)

    def _insert_child(self, path: str) -> SelTree:
        key = _child_key(path)
        with self._lock:
            existing = self.children.search(key)
            if existing is not None:
                return existing
            node = SelTree(path, self)
            self.children.insert(key, node)
        _log.debug("created new node '%s' (parent: '%s')", path, self.path)
        return node

    def _lookup(self, path: str, create: bool) -> SelTree | None:
        node: SelTree | None = self
        if self.path == path:
            return node
        _require_absolute(path)
        parent = self
        end = 0
        while True:
            parent = node
            end = path.find("/", end + 1)
            prefix = path if end == -1 else path[:end]
            with parent._lock:
                node = parent.children.search(_child_key(prefix))
            if node is None or end == -1:
                break
        if create and node is None:
            while end != -1:
                parent = parent._insert_child(path[:end])
                end = path.find("/", end + 1)
            node = parent._insert_child(path)
        return node

    def get_node(self, path: str) -> SelTree | None:
        """Return the node for ``path``, or None if it does not exist."""
        return self._lookup(path, create=False)

    def get_or_create_node(self, path: str) -> SelTree:
        """Return the node for ``path``, creating it and missing ancestors."""
        node = self._lookup(path, create=True)
        assert node is not None
        return node

    def is_empty(self) -> bool:
        """True if the node has neither children nor rules."""
        with self._lock:
            return len(self.children) == 0 and not self._has_rules()

    def add_rule(
        self,
        rx: str,
        restriction: int,
        rule_type: int,
        linenumber: int,
        filename: str | None,
        linebuf: str | None,
    ) -> tuple[RxRule, str]:
        """Compile ``rx`` and file it under its literal directory part.

        Returns the rule and the path of the node it was added to. Raises
        RuleError for an invalid regex or a double slash in the path part.
        """
        kind = RuleType(rule_type)
        try:
            rule = RxRule(
                rx,
                Restriction(restriction),
                config_filename=filename,
                config_linenumber=linenumber,
                config_line=linebuf,
            )
        except regex.error as err:
            raise RuleError(
                f"{filename}:{linenumber}: error in rule '{rx}': {err} (line: '{linebuf}')"
            ) from err

        rxtok = _strrxtok(rx)
        if "//" in rxtok:
            raise RuleError(
                f"{filename}:{linenumber}:1: error in rule '{rx}': invalid double slash "
                f"(line: '{linebuf}')"
            )

        node = self.get_or_create_node(rxtok)
        with node._lock:
            if kind is RuleType.NEGATIVE:
                node.neg_rules.append(rule)
            elif kind is RuleType.EQUAL:
                node.equ_rules.append(rule)
            else:
                node.sel_rules.append(rule)
        return rule, node.path

    def check(self, filename: str, file_type: int) -> tuple[MatchFlag, RxRule | None]:
        """Match ``filename`` of ``file_type`` against the tree's rules.

        Returns the match flags and the rule that decided the outcome. A
        selected file gets a node of its own in the tree.
        """
        _require_absolute(filename)
        _log.debug("check '%s'", filename)
        retval = 0
        parentname = filename
        while True:
            parentname = _parent_name(parentname)
            pnode = self.get_node(parentname)
            if pnode is not None:
                break
            retval |= _RECURSED

        retval, rule = _check_node(pnode, filename, int(file_type), retval | _TOP, None, 0)

        if retval & (_SEL | _EQ):
            self.get_or_create_node(filename)
            _log.debug("ADD '%s' (attr: %#x)", filename, rule.attr if rule else 0)
        else:
            _log.debug("do NOT add '%s'", filename)
        return MatchFlag(retval), rule

    def _tree_lines(self, depth: int) -> Iterator[str]:
        with self._lock:
            yield f"{'┝' if depth else '┌':<{depth}} {self.path}:"
            for rule in self.equ_rules:
                yield _rule_line(rule, depth, "=", True)
            for rule in self.sel_rules:
                yield _rule_line(rule, depth, "", True)
            for rule in self.neg_rules:
                yield _rule_line(rule, depth, "!", False)
            for child in self.children.values():
                yield from child._tree_lines(depth + 2)
        if depth == 0:
            yield "└"

    def log_tree(self, depth: int = 0) -> list[str]:
        """Log the tree and its rules; return the logged lines."""
        lines = list(self._tree_lines(depth))
        for line in lines:
            _log.debug("%s", line)
        return lines


def _check_list(
    rules: list[RxRule],
    text: str,
    file_type: int,
    rule_type: RuleType,
    depth: int,
    unrestricted_only: bool,
) -> tuple[int, RxRule | None]:
    result = 0
    for rule in rules:
        if unrestricted_only and rule.restriction:
            _log.debug(
                "%*cskip restricted '%s' rule as requested",
                depth + 2, " ", restriction_string(rule.restriction),
            )
            continue
        if rule.pattern.match(text):
            if not rule.restriction or file_type & rule.restriction:
                _log.debug(
                    "%*c'%s' matches regex '%s' of %s",
                    depth + 2, " ", text, rule.rx, rule_type_long_string(rule_type),
                )
                return (_RESTRICTED if rule.restriction else _RULE_MATCH), rule
            result = _PARTIAL
        else:
            partial = rule.pattern.match(text, partial=True)
            if partial is not None and partial.partial:
                result = _PARTIAL
    return result, None


def _check_negative(
    node: SelTree, text: str, file_type: int, retval: int, rule: RxRule | None, depth: int
) -> tuple[int, RxRule | None]:
    parentname = text
    while True:
        parentname = _parent_name(parentname)
        if not parentname > node.path:
            break
        result, matched = _check_list(
            node.neg_rules, parentname, int(Restriction.DIR), RuleType.NEGATIVE, depth + 4, True
        )
        if matched is not None:
            rule = matched
        if result == _RULE_MATCH:
            _log.debug("negative match for parent directory '%s'", parentname)
            return _NEG, rule

    result, matched = _check_list(
        node.neg_rules, text, file_type, RuleType.NEGATIVE, depth + 2, False
    )
    if matched is not None:
        rule = matched
    if result == _RESTRICTED:
        return _PARTIAL, rule
    if result == _RULE_MATCH:
        _log.debug("negative match for '%s' (node: '%s')", text, node.path)
        return _NEG, rule
    return retval, rule


def _check_node(
    node: SelTree | None,
    text: str,
    file_type: int,
    retval: int,
    rule: RxRule | None,
    depth: int,
) -> tuple[int, RxRule | None]:
    if node is None:
        return retval, rule

    with node._lock:
        if node._has_rules():
            if not retval & _RECURSED:
                retval |= _RECURSED
                if node.equ_rules:
                    result, matched = _check_list(
                        node.equ_rules, text, file_type, RuleType.EQUAL, depth, False
                    )
                    if matched is not None:
                        rule = matched
                    if result in (_RESTRICTED, _RULE_MATCH):
                        retval |= _EQ | _DEEP_EQ
                    elif result == _PARTIAL:
                        retval |= _PARTIAL

            if not retval & (_DEEP_EQ | _DEEP_SEL) and node.sel_rules:
                result, matched = _check_list(
                    node.sel_rules, text, file_type, RuleType.SELECTIVE, depth, False
                )
                if matched is not None:
                    rule = matched
                if result in (_RESTRICTED, _RULE_MATCH):
                    retval |= _SEL | _DEEP_SEL
                elif result == _PARTIAL:
                    retval |= _PARTIAL

            retval, rule = _check_node(
                node.parent, text, file_type, retval & ~_TOP, rule, depth + 2
            )

            if retval & (_SEL | _EQ) and node.neg_rules:
                retval, rule = _check_negative(node, text, file_type, retval, rule, depth)
        else:
            retval, rule = _check_node(
                node.parent, text, file_type, (retval | _RECURSED) & ~_TOP, rule, depth
            )

        if not retval & _TOP:
            retval &= (_EQ | _SEL) if retval & (_EQ | _SEL) else _PARTIAL
    return retval, rule


def init_tree() -> SelTree:
    """Return a new, empty tree rooted at '/'."""
    return SelTree("/", None)