"""Project scaffolding through the FusionKit CLI (``fk``)."""

import logging
import re
import shutil
import subprocess
import threading
import webbrowser
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from fusionkit_docs.config import get_settings

logger = logging.getLogger(__name__)

PROJECT_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9_-]+$")
FK_NOT_FOUND_MESSAGE = (
    "FusionKit CLI (fk) not found. Please install it first with: "
    "npm install -g @inform-appshell/fusion-kit-cli@latest"
)
BROWSER_DELAY_SECONDS = 3.0
SHELL_PORT = "8080"


@dataclass(frozen=True)
class FrameworkDetails:
    """Dev-server settings of a generated microfrontend."""

    port: str
    features: str
    run_command: tuple[str, ...]


FRAMEWORKS: dict[str, FrameworkDetails] = {
    "vue": FrameworkDetails("4300", "Elevate Design System, i18n, Linter", ("run", "build-and-run-mfe")),
    "angular": FrameworkDetails("4100", "Elevate Design System, AppShell UI Components", ("run", "start")),
    "react": FrameworkDetails("4200", "Elevate Design System, Redux", ("run", "build-and-run-mfe")),
}


def validate_project_name(name: object) -> str:
    """Return name if it is a usable project name, else raise ValueError."""
    if not isinstance(name, str) or not name:
        raise ValueError("Project name cannot be empty")
    if not PROJECT_NAME_PATTERN.match(name):
        raise ValueError(
            "Project name can only contain letters, numbers, hyphens, and underscores"
        )
    return name


def run_command(command: str, args: list[str], cwd: Optional[Path] = None) -> tuple[str, str]:
    """Run a command to completion and return (stdout, stderr).

    Raises:
        FileNotFoundError: If the executable does not exist
        RuntimeError: If the command exits with a non-zero code
    """
    executable = shutil.which(command) or command
    logger.info(f"Running: {command} {' '.join(args)}" + (f" (in {cwd})" if cwd else ""))
    result = subprocess.run(
        [executable, *args],
        cwd=cwd,
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        raise RuntimeError(f"Command failed with code {result.returncode}: {result.stderr}")
    return result.stdout, result.stderr


def _run_fk(args: list[str], kind: str) -> str:
    """Run ``fk`` and return its stdout, translating failures to messages."""
    fk = get_settings().fk_command
    try:
        stdout, stderr = run_command(fk, args)
    except FileNotFoundError:
        raise RuntimeError(FK_NOT_FOUND_MESSAGE) from None
    except RuntimeError as e:
        if "command not found" in str(e):
            raise RuntimeError(FK_NOT_FOUND_MESSAGE) from None
        raise RuntimeError(f"Failed to create {kind} project: {e}") from e

    if stderr and "error" in stderr:
        raise RuntimeError(f"Failed to create {kind} project: {stderr}")
    return stdout


def _open_browser_later(url: str) -> None:
    timer = threading.Timer(BROWSER_DELAY_SECONDS, webbrowser.open, args=[url])
    timer.daemon = True
    timer.start()


def _start_project(project_dir: Path, run_args: tuple[str, ...], url: str) -> bool:
    """Install dependencies, start the dev server detached and open the browser.

    Failures are logged; the project itself was already created.
    """
    try:
        run_command("npm", ["install"], cwd=project_dir)
        process = subprocess.Popen(
            [shutil.which("npm") or "npm", *run_args],
            cwd=project_dir,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
        logger.info(f"Started dev server for {project_dir} (pid {process.pid})")
    except (OSError, RuntimeError) as e:
        logger.warning(f"Post-setup of {project_dir} failed: {e}")
        return False

    if get_settings().open_browser:
        _open_browser_later(url)
    return True


def create_copilot(name: str) -> str:
    """Generate a copilot (MCP server) project with ``fk create copilot``."""
    name = validate_project_name(name)
    stdout = _run_fk(["create", "copilot", "-n", name], "copilot")

    return (
        f'Successfully created FusionKit copilot project "{name}"!\n\n'
        f"{stdout}\n\n"
        "Next steps:\n"
        f"1. Navigate to the project directory: cd {name}\n"
        "2. Install dependencies: npm install\n"
        "3. Build the project: npm run build\n"
        "4. Start the MCP server: npm start"
    )


def create_mfe(name: str, framework: str = "react") -> str:
    """Generate a microfrontend with ``fk create mfe`` and start it."""
    name = validate_project_name(name)
    details = FRAMEWORKS.get(framework)
    if details is None:
        raise ValueError(f"Unsupported framework: {framework}")

    stdout = _run_fk(["create", "mfe", "-n", name, "--mcp", "-f", framework], "MFE")

    full_path = Path.cwd() / name
    url = f"http://localhost:{details.port}"
    started = _start_project(full_path, details.run_command, url)

    label = framework.upper()
    lines = [
        f'Successfully created FusionKit {label} microfrontend project "{name}"!',
        f"Full path: {full_path}",
        stdout,
    ]
    if started:
        lines += [
            "Automated setup completed:",
            f"- {label} microfrontend created with {details.features}",
            "- Dependencies installed",
            "- Development server started",
            f"- Browser opening at {url}",
        ]
    else:
        lines.append("Automated setup did not finish; run npm install and start the project manually.")
    lines += [
        "",
        "You can:",
        f"- View it in your browser at {url}",
        f"- Navigate to: cd {name}",
        f"- Use all {framework} microfrontend features",
    ]
    return "\n".join(lines)


def create_shell(name: str) -> str:
    """Generate a shell application with copilot support and start it."""
    name = validate_project_name(name)
    stdout = _run_fk(["create", "shell", "-n", name, "--mcp"], "shell")

    full_path = Path.cwd() / name
    url = f"http://localhost:{SHELL_PORT}"
    started = _start_project(full_path, ("run", "dev"), url)

    lines = [
        f'Successfully created FusionKit shell project "{name}" with copilot integration!',
        f"Full path: {full_path}",
        stdout,
    ]
    if started:
        lines += [
            "Automated setup completed:",
            "- Project created with copilot support",
            "- Dependencies installed",
            "- Development server started",
            f"- Browser opening at {url}",
        ]
    else:
        lines.append("Automated setup did not finish; run npm install and npm run dev manually.")
    lines += [
        "",
        "You can:",
        f"- View it in your browser at {url}",
        f"- Navigate to: cd {name}",
        "- Use copilot integration features",
    ]
    return "\n".join(lines)
