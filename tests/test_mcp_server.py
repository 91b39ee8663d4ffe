"""
Tests for the FastMCP server wiring
"""

import asyncio
import json
import subprocess
import time
import zipfile
from unittest.mock import MagicMock

import pytest
from mcp.server.fastmcp.exceptions import ToolError

from conftest import CORE_MD, OVERVIEW_MD
from fusionkit_docs import scaffold
from fusionkit_docs.server import create_mcp_server
from fusionkit_docs.server.mcp_server import register_doc_resources


def result_text(result) -> str:
    """Text of the first content block, across FastMCP result shapes"""
    if isinstance(result, tuple):
        result = result[0]
    return list(result)[0].text


@pytest.fixture
def server(docs_dir):
    return create_mcp_server(docs_dir)


class TestTools:
    """Tool registration and calls"""

    @pytest.mark.asyncio
    async def test_tool_names(self, server):
        tools = await server.list_tools()
        assert {tool.name for tool in tools} == {
            "getFusionKitOverview",
            "getFusionKitPackages",
            "getPackageDocumentation",
            "getCodeExamples",
            "getMigrationGuide",
            "createCopilot",
            "createMfe",
            "createShell",
        }

    @pytest.mark.asyncio
    async def test_overview_section(self, server):
        result = await server.call_tool("getFusionKitOverview", {"section": "introduction"})
        assert json.loads(result_text(result)) == {
            "introduction": "FusionKit is a comprehensive framework for building modular applications."
        }

    @pytest.mark.asyncio
    async def test_packages(self, server):
        result = await server.call_tool("getFusionKitPackages", {"packageName": "cli"})
        assert json.loads(result_text(result)) == {
            "cli": "Command-line interface for FusionKit development."
        }

    @pytest.mark.asyncio
    async def test_package_documentation(self, server):
        result = await server.call_tool(
            "getPackageDocumentation", {"packageName": "cli", "section": "installation"}
        )
        assert json.loads(result_text(result)) == {
            "installation": "npm install -g @inform-appshell/fusion-kit-cli@latest"
        }

    @pytest.mark.asyncio
    async def test_code_examples_default_framework(self, server):
        result = await server.call_tool("getCodeExamples", {"useCase": "setup"})
        example = json.loads(result_text(result))
        assert example["useCase"] == "setup"
        assert example["framework"] == "react"
        assert 'import React from "react";' in example["code"]

    @pytest.mark.asyncio
    async def test_migration_guide(self, server):
        result = await server.call_tool("getMigrationGuide", {"fromVersion": "v1.0"})
        guide = json.loads(result_text(result))
        assert guide["title"] == "Migration from v1.0 to v2.0"
        assert guide["steps"] == ["Update dependencies", "Run migration script", "Test application"]

    @pytest.mark.asyncio
    async def test_lookup_error_becomes_tool_error(self, server):
        with pytest.raises(ToolError, match='No examples found for use case "nonexistent"'):
            await server.call_tool("getCodeExamples", {"useCase": "nonexistent"})

    @pytest.mark.asyncio
    async def test_unknown_package_becomes_tool_error(self, server):
        with pytest.raises(ToolError, match='Documentation for package "keycloak" not found'):
            await server.call_tool("getPackageDocumentation", {"packageName": "keycloak"})

    @pytest.mark.asyncio
    async def test_blank_version_reports_extraction_issue(self, server):
        with pytest.raises(ToolError, match="parameter extraction issue"):
            await server.call_tool("getMigrationGuide", {"fromVersion": "  "})

    @pytest.mark.asyncio
    async def test_scaffold_error_becomes_tool_error(self, server):
        with pytest.raises(ToolError, match="Project name can only contain"):
            await server.call_tool("createCopilot", {"name": "bad name"})


class TestResources:
    """Markdown files exposed as resources"""

    @pytest.mark.asyncio
    async def test_every_markdown_file_is_listed(self, server):
        resources = await server.list_resources()
        assert {str(resource.uri) for resource in resources} == {
            "docs://fusionkit/examples/react-setup.md",
            "docs://fusionkit/migration/v1-to-v2.md",
            "docs://fusionkit/overview.md",
            "docs://fusionkit/packages/fusion-kit-cli.md",
            "docs://fusionkit/packages/fusion-kit-core.md",
        }
        assert {resource.mimeType for resource in resources} == {"text/markdown"}

    @pytest.mark.asyncio
    async def test_read_resource(self, server):
        contents = list(await server.read_resource("docs://fusionkit/overview.md"))
        assert contents[0].content == OVERVIEW_MD

    @pytest.mark.asyncio
    async def test_resource_reads_current_file(self, server, docs_dir):
        (docs_dir / "packages" / "fusion-kit-core.md").write_text(CORE_MD + "\nUpdated.\n", encoding="utf-8")

        contents = list(await server.read_resource("docs://fusionkit/packages/fusion-kit-core.md"))
        assert contents[0].content.endswith("Updated.\n")

    def test_zip_source_has_no_resources(self, tmp_path):
        archive = tmp_path / "docs.zip"
        with zipfile.ZipFile(archive, "w") as zf:
            zf.writestr("overview.md", OVERVIEW_MD)

        server = create_mcp_server(archive)

        assert register_doc_resources(server, archive) == 0


class TestScaffoldTools:
    """Scaffolding tools run off the event loop"""

    @pytest.fixture
    def slow_fk(self, monkeypatch, tmp_path):
        def slow_run(*args, **kwargs):
            time.sleep(0.3)
            return subprocess.CompletedProcess(args=[], returncode=0, stdout="Project generated", stderr="")

        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(scaffold.shutil, "which", lambda command: None)
        monkeypatch.setattr(scaffold.subprocess, "run", slow_run)
        monkeypatch.setattr(scaffold.subprocess, "Popen", MagicMock())
        monkeypatch.setattr(scaffold.threading, "Timer", MagicMock())

    @pytest.mark.asyncio
    async def test_slow_scaffold_keeps_loop_responsive(self, server, slow_fk):
        task = asyncio.create_task(server.call_tool("createMfe", {"name": "demo"}))

        ticks = [time.monotonic()]
        while not task.done():
            await asyncio.sleep(0.02)
            ticks.append(time.monotonic())
        result = await task

        # fk run plus npm install take 0.6s; the loop must keep ticking meanwhile
        assert len(ticks) > 10
        assert max(b - a for a, b in zip(ticks, ticks[1:])) < 0.2
        assert 'microfrontend project "demo"' in result_text(result)

    @pytest.mark.asyncio
    async def test_concurrent_doc_call_finishes_first(self, server, slow_fk):
        scaffold_call = asyncio.create_task(server.call_tool("createShell", {"name": "host"}))
        await asyncio.sleep(0.05)

        overview = await server.call_tool("getFusionKitOverview", {"section": "quickStart"})

        assert not scaffold_call.done()
        assert "Follow these steps" in result_text(overview)
        await scaffold_call
