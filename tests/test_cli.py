from pathlib import Path

from click.testing import CliRunner

from operation_types.cli import _build_config, _filter_operations, main
from operation_types.parser.base import OperationDescriptor

FIXTURES = Path(__file__).parent / "fixtures"


def _make_operation(operation_id: str) -> OperationDescriptor:
    return OperationDescriptor(operation_id=operation_id, method="GET", path="/")


class TestCliList:
    def test_list_operations(self):
        runner = CliRunner()
        result = runner.invoke(main, ["list", str(FIXTURES / "petstore.yaml")])

        assert result.exit_code == 0
        assert "listPets\tGET\t/pets" in result.output
        assert "deletePetsPetId\tDELETE\t/pets/{petId}" in result.output

    def test_rejects_swagger(self):
        runner = CliRunner()
        result = runner.invoke(main, ["list", str(FIXTURES / "swagger2.yaml")])

        assert result.exit_code == 1
        assert "Swagger 2.0" in result.output


class TestCliGenerate:
    def test_generate_petstore(self, tmp_path):
        output_file = tmp_path / "api" / "types.ts"
        runner = CliRunner()
        result = runner.invoke(main, [
            "generate", str(FIXTURES / "petstore.yaml"),
            "-o", str(output_file),
        ])

        assert result.exit_code == 0
        content = output_file.read_text()
        assert "export type Pet = {" in content
        assert "export type ListPetsResponse = Pet[];" in content
        assert "export type ListPetsQueryParams = {" in content
        assert "export type ShowPetByIdPathParams = {" in content
        assert "export type CreatePetsRequestBody = {" in content
        assert "Context" not in content

    def test_generate_with_config_and_filter(self, tmp_path):
        output_file = tmp_path / "types.ts"
        runner = CliRunner()
        result = runner.invoke(main, [
            "generate", str(FIXTURES / "petstore.yaml"),
            "-o", str(output_file),
            "--config", str(FIXTURES / "config.yaml"),
            "--operation", "create*",
        ])

        assert result.exit_code == 0
        assert "Found 1 operations." in result.output
        content = output_file.read_text()
        assert "& FetcherContext;" in content
        assert '"X-Api-Key"?: string;' in content
        assert "ListPets" not in content

    def test_cli_options_override_config(self, tmp_path):
        output_file = tmp_path / "types.ts"
        runner = CliRunner()
        result = runner.invoke(main, [
            "generate", str(FIXTURES / "petstore.yaml"),
            "-o", str(output_file),
            "--config", str(FIXTURES / "config.yaml"),
            "--no-with-context",
        ])

        assert result.exit_code == 0
        assert "FetcherContext" not in output_file.read_text()

    def test_broken_reference_fails(self, tmp_path):
        doc = tmp_path / "broken.yaml"
        doc.write_text(
            "openapi: 3.0.0\n"
            "info: {title: x, version: '1'}\n"
            "paths:\n"
            "  /a:\n"
            "    get:\n"
            "      operationId: getA\n"
            "      responses:\n"
            "        '200':\n"
            "          $ref: '#/components/responses/Missing'\n"
        )
        output_file = tmp_path / "types.ts"
        runner = CliRunner()
        result = runner.invoke(main, ["generate", str(doc), "-o", str(output_file)])

        assert result.exit_code == 1
        assert "#/components/responses/Missing" in result.output
        assert not output_file.exists()

    def test_clashing_declaration_names_fail(self, tmp_path):
        doc = tmp_path / "clash.yaml"
        doc.write_text(
            "openapi: 3.0.0\n"
            "info: {title: x, version: '1'}\n"
            "paths:\n"
            "  /pets:\n"
            "    get:\n"
            "      operationId: listPets\n"
            "      responses:\n"
            "        '200':\n"
            "          description: ok\n"
            "          content:\n"
            "            application/json:\n"
            "              schema:\n"
            "                type: object\n"
            "                properties:\n"
            "                  total: {type: integer}\n"
            "components:\n"
            "  schemas:\n"
            "    ListPetsResponse:\n"
            "      type: object\n"
        )
        output_file = tmp_path / "types.ts"
        runner = CliRunner()
        result = runner.invoke(main, ["generate", str(doc), "-o", str(output_file)])

        assert result.exit_code == 1
        assert "Duplicate declaration name(s): ListPetsResponse" in result.output
        assert not output_file.exists()


class TestCliShow:
    def test_show_operation(self):
        runner = CliRunner()
        result = runner.invoke(main, [
            "show", str(FIXTURES / "petstore.yaml"), "showPetById", "--with-context",
        ])

        assert result.exit_code == 0
        assert "export type ShowPetByIdPathParams = {" in result.output
        assert "// data: Pet" in result.output
        assert "// error: Error" in result.output
        assert "// variables: ShowPetByIdVariables" in result.output

    def test_unknown_operation(self):
        runner = CliRunner()
        result = runner.invoke(main, ["show", str(FIXTURES / "petstore.yaml"), "nope"])

        assert result.exit_code == 1
        assert "Unknown operation: nope" in result.output


class TestFilterOperations:
    def test_no_patterns_keeps_everything(self):
        ops = [_make_operation("listPets"), _make_operation("createPets")]
        assert _filter_operations(ops, ()) == ops

    def test_glob_patterns(self):
        ops = [_make_operation("listPets"), _make_operation("createPets"), _make_operation("listUsers")]
        result = _filter_operations(ops, ("list*",))
        assert [op.operation_id for op in result] == ["listPets", "listUsers"]

    def test_no_match(self):
        ops = [_make_operation("listPets")]
        assert _filter_operations(ops, ("deleteOrders",)) == []


class TestBuildConfig:
    def test_defaults(self):
        config = _build_config(None, None, None, ())
        assert config.with_context_type is False

    def test_overrides(self):
        config = _build_config(FIXTURES / "config.yaml", "Ctx", None, ("X-Trace",))
        assert config.context_type_name == "Ctx"
        assert config.with_context_type is True
        assert config.injected_headers == ["X-Trace"]
