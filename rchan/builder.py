"""Batch-build every PKGBUILD directory with makepkg."""

import shutil
import subprocess
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from rchan.errors import BuildSettingsError
from rchan.scanner import PKGBUILD_FILENAME
from rchan.settings import DEFAULT_SETTINGS, SETTINGS_FILENAME, load_settings


@dataclass
class BuildFailure:
    package: str
    step: str
    error: str
    timestamp: str


@dataclass
class BuildSummary:
    total: int = 0
    succeeded: int = 0
    failed: int = 0
    failures: list = field(default_factory=list)

    def record_failure(self, package, step, error):
        self.failed += 1
        self.failures.append(BuildFailure(
            package=package,
            step=step,
            error=error,
            timestamp=datetime.now().isoformat(),
        ))

    def print_failures(self):
        """Print one block per recorded failure. Returns False if there were none."""
        if not self.failures:
            return False

        rule = "=" * 60
        print(f"\n{rule}\nBUILD FAILURES REPORT ({len(self.failures)} failures)\n{rule}")
        for i, failure in enumerate(self.failures, 1):
            print(f"\n{i}. {failure.package} [{failure.step}] at {failure.timestamp}")
            print(f"   {failure.error}")
        print(f"\n{rule}")
        return True


def run_command(command, cwd=None, debug=False):
    """Run a shell command and return (returncode, stdout, stderr)."""
    if debug:
        # Show output in real-time
        print(f"DEBUG: Running command: {command}")
        if cwd:
            print(f"DEBUG: In directory: {cwd}")
        result = subprocess.run(command, shell=True, cwd=cwd)
        return result.returncode, "", ""

    result = subprocess.run(command, stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True, shell=True, cwd=cwd)
    return result.returncode, result.stdout.strip(), result.stderr.strip()


def find_build_targets(base, exclude=()):
    """Return immediate subdirectories containing a PKGBUILD, sorted by name.

    `exclude` holds resolved paths that are never targets.
    """
    targets = []
    for path in Path(base).iterdir():
        try:
            if not path.is_dir() or path.resolve() in exclude:
                continue
            if (path / PKGBUILD_FILENAME).is_file():
                targets.append(path)
        except OSError:
            continue
    return sorted(targets, key=lambda p: p.name)


def _build_dir_problem(build_dir, base, packages):
    if base.is_relative_to(build_dir):
        return "it contains the working directory"
    for pkg in packages:
        if pkg.is_relative_to(build_dir):
            return f"it contains package directory {pkg.name}"
        if build_dir.is_relative_to(pkg):
            return f"it is inside package directory {pkg.name}"
    return None


def _output_dir_problem(output_dir, build_dir):
    if output_dir.is_relative_to(build_dir):
        return "it is inside the scratch build directory"
    return None


def _pick_dir(base, settings, key, problem_for):
    configured = (base / settings[key]).resolve()
    problem = problem_for(configured)
    if problem is None:
        return configured

    default = (base / DEFAULT_SETTINGS[key]).resolve()
    if default != configured:
        print(f"Warning: Ignoring {key} '{settings[key]}' in {SETTINGS_FILENAME} ({problem}), using '{DEFAULT_SETTINGS[key]}'")
        problem = problem_for(default)
        if problem is None:
            return default
    raise BuildSettingsError(f"Cannot use {default} as {key}: {problem}")


def resolve_build_dirs(base, settings):
    """Return resolved (output_dir, build_dir) that are safe to use.

    The scratch directory is emptied before and after every build, so it may
    not hold the working directory or any package sources, and the output
    directory may not live inside it. An unsafe configured value falls back
    to its default with a warning.
    """
    base = Path(base).resolve()
    default_build_dir = (base / DEFAULT_SETTINGS['build_dir']).resolve()
    # Leftovers in the default scratch directory are not package sources
    packages = [
        p.resolve() for p in find_build_targets(base)
        if p.resolve() != default_build_dir
    ]

    build_dir = _pick_dir(base, settings, 'build_dir',
                          lambda d: _build_dir_problem(d, base, packages))
    output_dir = _pick_dir(base, settings, 'output_dir',
                           lambda d: _output_dir_problem(d, build_dir))
    return output_dir, build_dir


def clean_dir(directory):
    """Remove all contents of a directory, keeping the directory itself."""
    directory = Path(directory)
    if not directory.exists():
        return
    for entry in directory.iterdir():
        if entry.is_dir() and not entry.is_symlink():
            shutil.rmtree(entry)
        else:
            entry.unlink()


def collect_artifacts(build_dir, output_dir, suffix):
    """Move built package archives into the output directory."""
    moved = []
    for file in sorted(Path(build_dir).iterdir()):
        if file.is_file() and file.name.endswith(suffix):
            shutil.move(str(file), str(Path(output_dir) / file.name))
            moved.append(file.name)
    return moved


def build_package(pkg_src, build_dir, output_dir, settings, summary, debug=False):
    """Build one package in the scratch directory. Returns True on success."""
    name = pkg_src.name

    try:
        shutil.copytree(pkg_src, build_dir, dirs_exist_ok=True)
    except OSError as e:
        print(f"  ERROR Failed to copy files: {e}\n")
        summary.record_failure(name, "copy", str(e))
        return False

    command = settings['makepkg_command']
    returncode, stdout, stderr = run_command(command, cwd=build_dir, debug=debug)
    if returncode != 0:
        print(f"  FAIL makepkg exited with {returncode}\n")
        error_msg = f"Command failed: '{command}' (exit code: {returncode}) in directory: {build_dir}"
        if stderr:
            error_msg += f"\nStderr: {stderr}"
        if stdout:
            error_msg += f"\nStdout: {stdout}"
        summary.record_failure(name, command, error_msg)
        return False

    try:
        moved = collect_artifacts(build_dir, output_dir, settings['artifact_suffix'])
    except OSError as e:
        print(f"  ERROR Failed to move packages to {output_dir.name}/: {e}\n")
        summary.record_failure(name, "collect artifacts", str(e))
        return False

    if not moved:
        suffix = settings['artifact_suffix']
        print(f"  WARN No {suffix} found after build\n")
        summary.record_failure(name, "collect artifacts", f"no artifact produced (no {suffix} file)")
        return False

    for fname in moved:
        print(f"  -> {fname}")
    print("  OK\n")
    summary.succeeded += 1
    return True


def run_build(base, settings=None, debug=False):
    """Build every subdirectory of `base` that contains a PKGBUILD.

    Each package is copied into the shared scratch directory, built with
    makepkg and its archives moved to the output directory. A failing
    package is recorded and the run moves on to the next one.
    """
    base = Path(base)
    if settings is None:
        settings = load_settings(base)

    output_dir, build_dir = resolve_build_dirs(base, settings)
    output_dir.mkdir(parents=True, exist_ok=True)
    build_dir.mkdir(parents=True, exist_ok=True)

    print("rchan build - PKGBUILD batch builder")
    print("=" * 50)
    print(f"Working directory: {base}\n")

    targets = find_build_targets(base, exclude={output_dir, build_dir})
    summary = BuildSummary(total=len(targets))

    if not targets:
        print("No subdirectories with PKGBUILD found.")
        return summary

    for i, pkg_src in enumerate(targets, 1):
        print(f"[{i}/{summary.total}] Building {pkg_src.name}")
        clean_dir(build_dir)
        try:
            build_package(pkg_src, build_dir, output_dir, settings, summary, debug=debug)
        finally:
            clean_dir(build_dir)

    print(f"Summary: {summary.total} packages, {summary.succeeded} succeeded, {summary.failed} failed")
    summary.print_failures()
    return summary
