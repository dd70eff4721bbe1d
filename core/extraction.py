"""
Module for extracting exported identifiers from Go source files.

This module provides functionality to:
- Parse a Go source file into a tree-sitter syntax tree
- Walk the top-level declarations (imports, constants, variables, types,
  functions and methods) and collect the names they declare
- Keep only exported names, i.e. names starting with an uppercase letter

Only the top level of a file is visited; declarations local to function
bodies are never seen. The set of top-level declaration kinds is closed: any
other node, or a declared name with an unexpected shape, raises
UnsupportedConstructError instead of being skipped.
"""

from pathlib import Path
from typing import Generator

from tree_sitter import Node, Parser

from adapters.treesitter import get_go_parser
from constants import (
    DECLARATION_SPECS,
    FUNCTION_DECLARATIONS,
    IGNORED_TOP_LEVEL_NODES,
)
from core.exceptions import SourceParseError, UnsupportedConstructError
from core.file_io import FileReader, FilesystemFileReader


def is_exported(name: str) -> bool:
    """
    Check if a Go identifier is exported (its first character is an uppercase letter).
    """
    return bool(name) and name[0].isupper()


class GoSyntaxExtractor:
    """
    Extract exported top-level identifiers from Go sources using tree-sitter.

    Attributes:
        parser: The tree-sitter parser used for every file.
        file_reader: Reader used to load files from disk.
    """

    def __init__(
        self,
        parser: Parser | None = None,
        file_reader: FileReader | None = None,
    ):
        self.parser = parser if parser is not None else get_go_parser()
        self.file_reader = (
            file_reader if file_reader is not None else FilesystemFileReader()
        )

    def extract(self, file_path: Path) -> list[str]:
        """
        Extract the exported identifiers declared at the top level of a file.

        Args:
            file_path: Path to the Go source file.

        Returns:
            list[str]: Exported names in declaration order. Duplicates are kept.

        Raises:
            FileReadError: If the file cannot be read.
            SourceParseError: If the file contains syntax errors.
            UnsupportedConstructError: If an unknown declaration kind or a
                qualified name is found.
        """
        source = self.file_reader.read_bytes(file_path)
        return self.extract_source(source, origin=str(file_path))

    def extract_source(self, source: bytes, origin: str = "<source>") -> list[str]:
        """
        Extract exported top-level identifiers from Go source held in memory.

        Args:
            source: The Go source code.
            origin: Name used in error messages (usually the file path).

        Returns:
            list[str]: Exported names in declaration order.
        """
        root = self._parse(source, origin)

        identifiers: list[str] = []
        for decl in root.named_children:
            for name_node in self._declared_names(decl, origin):
                name = _node_text(name_node)
                if "." in name:
                    raise UnsupportedConstructError(
                        message=f"Unhandled identifier {name!r} in {origin}",
                        construct=name,
                        file_path=origin,
                    )
                if is_exported(name):
                    identifiers.append(name)

        return identifiers

    def _parse(self, source: bytes, origin: str) -> Node:
        tree = self.parser.parse(source)
        root = tree.root_node

        if root.has_error:
            bad = _first_error_node(root)
            line = column = None
            where = ""
            if bad is not None:
                # tree-sitter points are 0-based
                line, column = bad.start_point[0] + 1, bad.start_point[1] + 1
                where = f":{line}:{column}"
            raise SourceParseError(
                message=f"Syntax error in {origin}{where}",
                file_path=origin,
                line=line,
                column=column,
            )
        return root

    def _declared_names(self, decl: Node, origin: str) -> list[Node]:
        """
        Return the name nodes declared by one top-level node.

        Raises:
            UnsupportedConstructError: If the node is not a known declaration kind.
        """
        if decl.type in IGNORED_TOP_LEVEL_NODES:
            return []

        if decl.type in FUNCTION_DECLARATIONS:
            return decl.children_by_field_name("name")

        if decl.type in DECLARATION_SPECS:
            names: list[Node] = []
            for spec in self._specs(decl, DECLARATION_SPECS[decl.type], origin):
                # Unnamed imports have no "name" field and contribute nothing
                names.extend(spec.children_by_field_name("name"))
            return names

        raise UnsupportedConstructError(
            message=f"Unhandled declaration {decl.type!r} in {origin}",
            construct=decl.type,
            file_path=origin,
        )

    def _specs(
        self, node: Node, allowed: frozenset[str], origin: str
    ) -> Generator[Node, None, None]:
        # Grouped declarations may wrap their specs in a "*_spec_list" node
        for child in node.named_children:
            if child.type == "comment":
                continue
            if child.type.endswith("_spec_list"):
                yield from self._specs(child, allowed, origin)
            elif child.type in allowed:
                yield child
            else:
                raise UnsupportedConstructError(
                    message=f"Unhandled spec {child.type!r} in {node.type!r} in {origin}",
                    construct=child.type,
                    file_path=origin,
                )


def _node_text(node: Node) -> str:
    return node.text.decode("utf-8") if node.text else ""


def _first_error_node(node: Node) -> Node | None:
    if node.is_error or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_error or child.is_missing:
            found = _first_error_node(child)
            if found is not None:
                return found
    return None
