"""Parsing utilities for depthlint."""

from parse.module_refs import (
    DynamicImportCall,
    ModuleReference,
    ReExport,
    RequireCall,
    StaticImport,
    extract_module_reference,
)
from parse.traverse import traverse
from parse.treesitter_modules import (
    SUPPORTED_EXTENSIONS,
    dialect_for_path,
    get_parser,
    parse_source,
    string_literal_value,
)

__all__ = [
    "SUPPORTED_EXTENSIONS",
    "DynamicImportCall",
    "ModuleReference",
    "ReExport",
    "RequireCall",
    "StaticImport",
    "dialect_for_path",
    "extract_module_reference",
    "get_parser",
    "parse_source",
    "string_literal_value",
    "traverse",
]
