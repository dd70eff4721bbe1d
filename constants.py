"""
Application-wide constants and the seed vocabulary.

This module defines the static word lists that every dictionary starts from
(Go keywords, predeclared identifiers and a curated set of extra words) and
the tree-sitter node kinds the syntax extractor recognizes at the top level
of a Go source file.
"""

from typing import Final


# https://go.dev/ref/spec#Keywords
KEYWORDS: Final[tuple[str, ...]] = (
    "break", "default", "func", "interface", "select",
    "case", "defer", "go", "map", "struct",
    "chan", "else", "goto", "package", "switch",
    "const", "fallthrough", "if", "range", "type",
    "continue", "for", "import", "return", "var",
)  # fmt: skip

# https://pkg.go.dev/builtin
BUILTINS: Final[tuple[str, ...]] = (
    "true", "false", "iota", "nil",
    "append", "cap", "clear", "close", "complex", "copy", "delete", "imag",
    "len", "make", "max", "min", "new", "panic", "print", "println", "real",
    "recover",
    "any", "bool", "byte", "comparable", "complex128", "complex64", "error",
    "float32", "float64",
    "int", "int16", "int32", "int64", "int8",
    "rune", "string",
    "uint", "uint16", "uint32", "uint64", "uint8", "uintptr",
)  # fmt: skip

# Words that show up next to std code but are not declared by it:
# struct tag values, GOOS/GOARCH names and release tags.
EXTRA_WORDS: Final[tuple[str, ...]] = (
    "omitempty", "inline",
    "aix", "android", "darwin", "dragonfly", "freebsd", "illumos", "ios",
    "js", "linux", "netbsd", "openbsd", "plan9", "solaris", "wasip1",
    "windows",
    "amd64", "arm64", "loong64", "mips", "mipsle", "mips64", "mips64le",
    "ppc64", "ppc64le", "riscv64", "s390x", "wasm",
    "go1", "cgo", "gccgo", "gc",
)  # fmt: skip

# Import paths containing this marker are implementation details of std and
# never contribute words ("internal/trace", "net/http/internal", ...).
INTERNAL_MARKER: Final[str] = "internal"

# Top-level node kinds that carry no declared names.
IGNORED_TOP_LEVEL_NODES: Final[frozenset[str]] = frozenset(
    {"package_clause", "comment"}
)

# Spec node kinds allowed inside each declaration kind.
DECLARATION_SPECS: Final[dict[str, frozenset[str]]] = {
    "import_declaration": frozenset({"import_spec"}),
    "const_declaration": frozenset({"const_spec"}),
    "var_declaration": frozenset({"var_spec"}),
    "type_declaration": frozenset({"type_spec", "type_alias"}),
}

FUNCTION_DECLARATIONS: Final[frozenset[str]] = frozenset(
    {"function_declaration", "method_declaration"}
)

DEFAULT_GO_BINARY: Final[str] = "go"
