"""
TypeScript type compiler.

Renders type specifications as TypeScript interfaces and type aliases
using the templates shipped next to this module.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from ...core.compiler import CompilationError, TypeCompiler
from ...core.config import CompilerOptions
from ...core.templates import TemplateError, create_template_engine, jsdoc
from ...core.types import (
    AnyType,
    ArrayOf,
    Exclude,
    Never,
    ObjectType,
    Primitive,
    Raw,
    Reference,
    StoryContent,
    TypeSpec,
    UnionOf,
)
from .naming import is_valid_type_name, property_key

TEMPLATE_DIR = Path(__file__).parent / "templates"

PRIMITIVE_TS_TYPES = {
    "string": "string",
    "number": "number",
    "integer": "number",
    "boolean": "boolean",
    "null": "null",
}


class TypeScriptCompiler(TypeCompiler):
    """Compiles type specifications into TypeScript declarations."""

    def __init__(self, template_dir: Optional[Path] = None):
        """Initialize compiler with its template directory."""
        self.template_engine = create_template_engine(template_dir or TEMPLATE_DIR)

    @property
    def language_name(self) -> str:
        return "typescript"

    @property
    def file_extension(self) -> str:
        return ".d.ts"

    def compile(
        self, spec: TypeSpec, name: str, options: Optional[CompilerOptions] = None
    ) -> str:
        """Render `spec` as an exported interface or type alias named `name`."""
        options = options or CompilerOptions()

        if not name or not is_valid_type_name(name):
            raise CompilationError(f"Invalid type name: {name!r}")

        context: Dict[str, Any] = {
            "name": name,
            "export": "export " if options.export_types else "",
            "indent": options.indent,
            "description": spec.description
            if isinstance(spec, ObjectType) and options.add_comments
            else None,
        }

        if isinstance(spec, ObjectType):
            template_name = "interface.ts.j2"
            context["properties"] = self._properties(spec, options, depth=1)
            context["index_signature"] = self._allows_additional(spec, options)
        else:
            template_name = "type_alias.ts.j2"
            context["type"] = self.render_type(spec, options)

        if not self.template_engine.template_exists(template_name):
            raise CompilationError(f"{template_name} template not found")

        try:
            code = self.template_engine.render_template(template_name, context)
        except TemplateError as e:
            raise CompilationError(f"Failed to render {name}: {e}") from e

        return self.format_code(code)

    def preamble(self, options: Optional[CompilerOptions] = None) -> List[str]:
        """Banner comment and the import of the story wrapper type."""
        options = options or CompilerOptions()
        lines = []

        if options.banner_comment:
            lines.append(options.banner_comment)

        if options.story_type_import and options.story_type_name:
            imports = [(options.story_type_import, [options.story_type_name])]
            try:
                rendered = self.template_engine.render_template(
                    "imports.ts.j2", {"imports": imports}
                )
            except TemplateError as e:
                raise CompilationError(f"Failed to render imports: {e}") from e
            lines.extend(line for line in rendered.split("\n") if line.strip())

        return lines

    # Expression rendering

    def render_type(self, spec: TypeSpec, options: CompilerOptions, depth: int = 0) -> str:
        """Render a type expression."""
        if isinstance(spec, Primitive):
            return self._render_primitive(spec)

        if isinstance(spec, ArrayOf):
            if isinstance(spec.items, Never):
                return "never[]"
            items = self.render_type(spec.items, options, depth)
            if self._needs_parens(spec.items):
                return f"({items})[]"
            return f"{items}[]"

        if isinstance(spec, Reference):
            return spec.name

        if isinstance(spec, UnionOf):
            if not spec.members:
                return "never"
            return " | ".join(self.render_type(m, options, depth) for m in spec.members)

        if isinstance(spec, Exclude):
            base = self.render_type(spec.base, options, depth)
            if not spec.excluded:
                return base
            excluded = " | ".join(self.render_type(e, options, depth) for e in spec.excluded)
            return f"Exclude<{base}, {excluded}>"

        if isinstance(spec, StoryContent):
            return f"{options.story_type_name}<{spec.type_name}>"

        if isinstance(spec, ObjectType):
            return self._render_object(spec, options, depth)

        if isinstance(spec, Never):
            return "never"

        if isinstance(spec, AnyType):
            return "any"

        if isinstance(spec, Raw):
            return spec.text

        raise CompilationError(f"Unsupported type specification: {type(spec).__name__}")

    def _render_primitive(self, spec: Primitive) -> str:
        if spec.enum is not None:
            if not spec.enum:
                return "never"
            return " | ".join(self._literal(value) for value in spec.enum)

        types = []
        for schema_type in spec.types:
            if schema_type not in PRIMITIVE_TS_TYPES:
                raise CompilationError(f"Unsupported primitive type: {schema_type!r}")
            ts_type = PRIMITIVE_TS_TYPES[schema_type]
            if ts_type not in types:
                types.append(ts_type)

        return " | ".join(types) if types else "any"

    def _literal(self, value: Any) -> str:
        if value is None or isinstance(value, (str, bool, int, float)):
            return json.dumps(value, ensure_ascii=False)
        raise CompilationError(f"Unsupported enum value: {value!r}")

    def _needs_parens(self, spec: TypeSpec) -> bool:
        if isinstance(spec, UnionOf):
            return len(spec.members) > 1
        if isinstance(spec, Primitive):
            if spec.enum is not None:
                return len(spec.enum) > 1
            return len({PRIMITIVE_TS_TYPES.get(t, t) for t in spec.types}) > 1
        if isinstance(spec, Raw):
            return "|" in spec.text or "&" in spec.text
        return False

    def _allows_additional(self, spec: ObjectType, options: CompilerOptions) -> bool:
        if spec.additional_properties is None:
            return options.additional_properties
        return spec.additional_properties

    def _properties(
        self, spec: ObjectType, options: CompilerOptions, depth: int
    ) -> List[Dict[str, Any]]:
        properties = []
        for key, value in spec.properties.items():
            comment = spec.descriptions.get(key) if options.add_comments else None
            properties.append(
                {
                    "key": property_key(key),
                    "marker": "" if spec.is_required(key) else "?",
                    "type": self.render_type(value, options, depth),
                    "comment": comment,
                }
            )
        return properties

    def _render_object(self, spec: ObjectType, options: CompilerOptions, depth: int) -> str:
        additional = self._allows_additional(spec, options)
        properties = self._properties(spec, options, depth + 1)

        # Closed objects with at most one property stay on one line
        if not additional and len(properties) <= 1:
            if not properties:
                return "{}"
            prop = properties[0]
            return f"{{ {prop['key']}{prop['marker']}: {prop['type']} }}"

        indent = options.indent
        inner = indent * (depth + 1)
        lines = ["{"]
        for prop in properties:
            if prop["comment"]:
                lines.append(jsdoc(prop["comment"], inner))
            lines.append(f"{inner}{prop['key']}{prop['marker']}: {prop['type']};")
        if additional:
            lines.append(f"{inner}[k: string]: unknown;")
        lines.append(f"{indent * depth}}}")
        return "\n".join(lines)
