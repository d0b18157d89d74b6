"""CLI entry point for operation-types."""

import fnmatch
from pathlib import Path

import click

from operation_types.config import GeneratorConfig, load_config
from operation_types.errors import OperationTypesError
from operation_types.generator.operation import check_unique_names, component_declarations, get_operation_types
from operation_types.generator.printer import print_declarations, print_type
from operation_types.parser.base import ApiDocument, OperationDescriptor
from operation_types.parser.detect import detect_format
from operation_types.parser.openapi import parse_openapi

HEADER = "/**\n * Generated by operation-types from {source}. Do not edit.\n */\n\n"


def _parse_doc(file_path: Path) -> ApiDocument:
    fmt = detect_format(file_path)
    if fmt == "swagger":
        raise click.ClickException(f"{file_path} is a Swagger 2.0 document; convert it to OpenAPI 3 first.")
    try:
        return parse_openapi(file_path)
    except OperationTypesError as e:
        raise click.ClickException(str(e)) from e


def _filter_operations(operations: list[OperationDescriptor], patterns: tuple[str, ...]) -> list[OperationDescriptor]:
    """Keep operations whose id matches one of the glob patterns (all when none given)."""
    if not patterns:
        return list(operations)
    return [op for op in operations if any(fnmatch.fnmatchcase(op.operation_id, p) for p in patterns)]


def _build_config(
    config_path: Path | None,
    context_type: str | None,
    with_context: bool | None,
    inject_headers: tuple[str, ...],
) -> GeneratorConfig:
    try:
        config = load_config(config_path) if config_path else GeneratorConfig()
    except OperationTypesError as e:
        raise click.ClickException(str(e)) from e

    updates: dict = {}
    if context_type is not None:
        updates["context_type_name"] = context_type
    if with_context is not None:
        updates["with_context_type"] = with_context
    if inject_headers:
        updates["injected_headers"] = list(inject_headers)
    return config.model_copy(update=updates)


@click.group()
def main():
    """Operation Types: generate TypeScript types for OpenAPI operations."""
    pass


@main.command("list")
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def list_operations(doc_path: Path):
    """List the operations of an OpenAPI document."""
    document = _parse_doc(doc_path)
    for op in document.operations:
        click.echo(f"{op.operation_id}\t{op.method}\t{op.path}")


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(dir_okay=False, path_type=Path), help="Output TypeScript file.")
@click.option("--operation", "operations", multiple=True, help="Operation id glob to include (repeatable).")
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="YAML generator config.")
@click.option("--context-type", default=None, help="Name of the context type merged into variables.")
@click.option("--with-context/--no-with-context", default=None, help="Intersect every variables type with the context type.")
@click.option("--inject-header", "inject_headers", multiple=True, help="Header supplied by the runtime (repeatable).")
def generate(
    doc_path: Path,
    output: Path,
    operations: tuple[str, ...],
    config_path: Path | None,
    context_type: str | None,
    with_context: bool | None,
    inject_headers: tuple[str, ...],
):
    """Generate operation types for an OpenAPI document."""
    click.echo(f"Parsing {doc_path}...")
    document = _parse_doc(doc_path)
    config = _build_config(config_path, context_type, with_context, inject_headers)

    selected = _filter_operations(document.operations, operations)
    if not selected:
        click.echo("Warning: no operation matched.", err=True)
    click.echo(f"Found {len(selected)} operations.")

    try:
        declarations = list(component_declarations(document.components))
        for op in selected:
            declarations.extend(get_operation_types(op, document.components, config).declarations)
        check_unique_names(declarations)
    except OperationTypesError as e:
        raise click.ClickException(str(e)) from e

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(HEADER.format(source=doc_path.name) + print_declarations(declarations), encoding="utf-8")
    click.echo(f"Wrote {len(declarations)} declarations to {output}")


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("operation_id")
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="YAML generator config.")
@click.option("--context-type", default=None, help="Name of the context type merged into variables.")
@click.option("--with-context/--no-with-context", default=None, help="Intersect the variables type with the context type.")
@click.option("--inject-header", "inject_headers", multiple=True, help="Header supplied by the runtime (repeatable).")
def show(
    doc_path: Path,
    operation_id: str,
    config_path: Path | None,
    context_type: str | None,
    with_context: bool | None,
    inject_headers: tuple[str, ...],
):
    """Print the declarations and resolved types of one operation."""
    document = _parse_doc(doc_path)
    config = _build_config(config_path, context_type, with_context, inject_headers)

    op = document.get_operation(operation_id)
    if op is None:
        raise click.ClickException(f"Unknown operation: {operation_id}")

    try:
        result = get_operation_types(op, document.components, config)
    except OperationTypesError as e:
        raise click.ClickException(str(e)) from e

    if result.declarations:
        click.echo(print_declarations(result.declarations))
    for label, expr in (
        ("data", result.data_type),
        ("error", result.error_type),
        ("requestBody", result.request_body_type),
        ("pathParams", result.path_params_type),
        ("queryParams", result.query_params_type),
        ("headers", result.headers_type),
        ("variables", result.variables_type),
    ):
        click.echo(f"// {label}: {print_type(expr)}")
