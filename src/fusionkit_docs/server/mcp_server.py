"""FastMCP server implementation for FusionKit docs."""

import json
import logging
from pathlib import Path
from typing import Literal, Optional
from urllib.parse import quote

import anyio
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from fusionkit_docs import retrieval, scaffold

logger = logging.getLogger(__name__)

RESOURCE_URI_PREFIX = "docs://fusionkit/"


def _extraction_issue(thing: str) -> ToolError:
    return ToolError(
        f"No {thing} was extracted from your request. "
        "This appears to be a parameter extraction issue."
    )


def _document_reader(path: Path):
    def read_document() -> str:
        return path.read_text(encoding="utf-8")

    return read_document


def register_doc_resources(mcp: FastMCP, docs_path: Path) -> int:
    """Expose every markdown file under docs_path as an MCP resource.

    Content is read from disk on each access. Returns the number of
    registered resources.
    """
    if not docs_path.is_dir():
        logger.warning(f"Cannot register doc resources, not a directory: {docs_path}")
        return 0

    count = 0
    for full_path in sorted(docs_path.rglob("*.md")):
        if not full_path.is_file():
            continue
        rel_path = full_path.relative_to(docs_path).as_posix()

        mcp.resource(
            RESOURCE_URI_PREFIX + quote(rel_path),
            name=f"Document: {full_path.name}",
            description=f"Markdown document from {rel_path}",
            mime_type="text/markdown",
        )(_document_reader(full_path))
        count += 1

    logger.info(f"Registered {count} documentation resources from {docs_path}")
    return count


def create_mcp_server(docs_path: Path) -> FastMCP:
    """Create an MCP server for a FusionKit documentation source.

    The documentation is re-indexed on each tool call (or served from the
    index cache when enabled), so edits show up without a restart.

    Args:
        docs_path: Folder or .zip holding the markdown documentation

    Returns:
        Configured FastMCP server instance
    """
    mcp = FastMCP(
        name="fusionkit-docs",
    )

    @mcp.tool(
        name="getFusionKitOverview",
        description=(
            "Get overview information about FusionKit including introduction, key benefits, "
            "quick start guide, and deployment scenarios. When user asks about FusionKit "
            "overview, introduction, benefits, or deployment info, extract the specific "
            "section they want."
        ),
    )
    async def get_fusionkit_overview(
        section: Literal[
            "introduction", "keyBenefits", "quickStart", "deploymentScenarios", "all"
        ] = "all",
    ) -> str:
        """Return the FusionKit overview as JSON."""
        try:
            overview = await retrieval.get_fusionkit_overview(section, docs_path=docs_path)
        except (LookupError, ValueError) as e:
            raise ToolError(str(e)) from e
        return json.dumps(overview)

    @mcp.tool(
        name="getFusionKitPackages",
        description=(
            "List FusionKit packages with a short description of each. When user asks which "
            "packages exist or what a package is for, extract the package name if mentioned."
        ),
    )
    async def get_fusionkit_packages(
        packageName: Optional[
            Literal["core", "cli", "contracts", "keycloak", "module-federation"]
        ] = None,
    ) -> str:
        """Return package descriptions as JSON."""
        try:
            packages = await retrieval.get_fusionkit_packages(packageName, docs_path=docs_path)
        except (LookupError, ValueError) as e:
            raise ToolError(str(e)) from e
        return json.dumps(packages)

    @mcp.tool(
        name="getPackageDocumentation",
        description=(
            "Get documentation for specific FusionKit packages including installation, API "
            "reference, and usage examples. When user asks for package documentation, extract "
            "the package name and specific section if mentioned."
        ),
    )
    async def get_package_documentation(
        packageName: Literal["core", "cli", "contracts", "keycloak", "module-federation"],
        section: Literal["overview", "installation", "api", "examples", "all"] = "all",
    ) -> str:
        """Return one package's documentation as JSON."""
        if not packageName:
            raise _extraction_issue("package name")
        try:
            docs = await retrieval.get_package_documentation(
                packageName, section, docs_path=docs_path
            )
        except (LookupError, ValueError) as e:
            raise ToolError(str(e)) from e
        return json.dumps(docs)

    @mcp.tool(
        name="getCodeExamples",
        description=(
            "Get FusionKit code examples for different use cases and frameworks. When user "
            "asks for FusionKit code examples, setup guides, authentication examples, or "
            "framework-specific implementations, extract the use case and framework and pass "
            "them as parameters."
        ),
    )
    async def get_code_examples(
        useCase: str,
        framework: Literal["angular", "react", "vue", "vanilla"] = retrieval.DEFAULT_FRAMEWORK,
    ) -> str:
        """Return a code example as JSON.

        Args:
            useCase: Topic such as "getting-started", "authentication" or
                "configuration", or a short natural-language description
            framework: Framework for the example; defaults to react
        """
        if not useCase or not useCase.strip():
            raise _extraction_issue("use case")
        try:
            example = await retrieval.get_code_examples(useCase, framework, docs_path=docs_path)
        except (LookupError, ValueError) as e:
            raise ToolError(str(e)) from e
        return json.dumps(example)

    @mcp.tool(
        name="getMigrationGuide",
        description=(
            "Get migration guide between different versions of FusionKit. When user asks about "
            "migrating, upgrading, or version changes, extract the source and target versions."
        ),
    )
    async def get_migration_guide(fromVersion: str, toVersion: str = "latest") -> str:
        """Return a migration guide as JSON."""
        if not fromVersion or not fromVersion.strip():
            raise _extraction_issue("source version")
        try:
            guide = await retrieval.get_migration_guide(
                fromVersion, toVersion, docs_path=docs_path
            )
        except (LookupError, ValueError) as e:
            raise ToolError(str(e)) from e
        return json.dumps(guide)

    @mcp.tool(
        name="createCopilot",
        description=(
            'Create a new FusionKit copilot project using the FusionKit CLI command '
            '"fk create copilot -n <name>". This will generate a complete MCP server project '
            "structure with all necessary files and configurations."
        ),
    )
    async def create_copilot(name: str) -> str:
        """Scaffold a copilot project."""
        try:
            return await anyio.to_thread.run_sync(scaffold.create_copilot, name)
        except (RuntimeError, ValueError) as e:
            raise ToolError(str(e)) from e

    @mcp.tool(
        name="createMfe",
        description=(
            "Create a new FusionKit microfrontend project using the FusionKit CLI command "
            '"fk create mfe -n <name> --mcp -f <framework>". Supports Vue, Angular, and React '
            "frameworks (React is default)."
        ),
    )
    async def create_mfe(
        name: str, framework: Literal["vue", "angular", "react"] = "react"
    ) -> str:
        """Scaffold and start a microfrontend project."""
        try:
            return await anyio.to_thread.run_sync(scaffold.create_mfe, name, framework)
        except (RuntimeError, ValueError) as e:
            raise ToolError(str(e)) from e

    @mcp.tool(
        name="createShell",
        description=(
            "Create a new FusionKit shell project with copilot integration using the FusionKit "
            'CLI command "fk create shell -n <name> --mcp".'
        ),
    )
    async def create_shell(name: str) -> str:
        """Scaffold and start a shell project."""
        try:
            return await anyio.to_thread.run_sync(scaffold.create_shell, name)
        except (RuntimeError, ValueError) as e:
            raise ToolError(str(e)) from e

    register_doc_resources(mcp, docs_path)

    return mcp
