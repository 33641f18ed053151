"""Tech stack detector for identifying a project's technologies from its manifests."""

import json
import re
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from superai.core.logger.logger import get_logger


class TechStack(BaseModel):
    """Detected technology stack."""

    labels: list[str] = Field(
        default_factory=list,
        description="Deduplicated, sorted technology labels",
    )
    manifests: list[str] = Field(
        default_factory=list,
        description="Manifest files found, in check order",
    )
    source_path: str | None = None

    @property
    def is_empty(self) -> bool:
        """Whether no technology was recognised."""
        return not self.labels


def sort_labels(labels: list[str]) -> list[str]:
    """Deduplicate and sort labels case-insensitively.

    Args:
        labels: Labels in detection order, possibly repeated.

    Returns:
        Sorted unique labels.
    """
    return sorted(set(labels), key=lambda label: (label.casefold(), label))


def normalize_package_name(name: str) -> str:
    """Normalize a Python distribution name (PEP 503)."""
    return re.sub(r"[-_.]+", "-", name).lower()


class TechStackDetector:
    """Detector for project technology stack.

    Manifests are parsed as structured data and only dependency names are
    matched, so a word in a description or comment never produces a label.
    """

    # package.json: label -> exact package names / scope prefixes
    NPM_RULES: dict[str, dict[str, list[str]]] = {
        # Frontend frameworks
        "React": {"packages": ["react"]},
        "Vue": {"packages": ["vue"]},
        "Angular": {"prefixes": ["@angular/"]},
        "Svelte": {"packages": ["svelte"]},
        "Next.js": {"packages": ["next"]},
        "Nuxt": {"packages": ["nuxt"]},
        "Vite": {"packages": ["vite"], "prefixes": ["@vitejs/"]},
        "Webpack": {"packages": ["webpack"]},
        "TypeScript": {"packages": ["typescript"]},
        # Testing
        "Jest": {"packages": ["jest"]},
        "Vitest": {"packages": ["vitest"]},
        "Testing Library": {"prefixes": ["@testing-library/"]},
        "Cypress": {"packages": ["cypress"]},
        "Playwright": {"packages": ["playwright", "@playwright/test"]},
        # Build tools
        "esbuild": {"packages": ["esbuild"]},
        "Rollup": {"packages": ["rollup"]},
        "Parcel": {"packages": ["parcel"]},
    }

    NPM_DEPENDENCY_KEYS = [
        "dependencies",
        "devDependencies",
        "peerDependencies",
        "optionalDependencies",
    ]

    # composer.json: label -> vendor prefixes / exact names / substrings
    COMPOSER_RULES: dict[str, dict[str, list[str]]] = {
        "Laravel": {"prefixes": ["laravel/"]},
        "Symfony": {"prefixes": ["symfony/"]},
        "WordPress": {"contains": ["wordpress"]},
        "PHPUnit": {"packages": ["phpunit/phpunit"]},
    }

    PYTHON_RULES: dict[str, str] = {
        "Django": "django",
        "Flask": "flask",
        "FastAPI": "fastapi",
    }

    RUBY_RULES: dict[str, str] = {
        "Rails": "rails",
        "Sinatra": "sinatra",
    }

    PYTHON_MANIFESTS = ["requirements.txt", "pyproject.toml", "setup.py"]
    GRADLE_MANIFESTS = ["build.gradle", "build.gradle.kts"]

    REQUIREMENT_NAME_PATTERN = re.compile(r"^\s*([A-Za-z0-9][A-Za-z0-9._-]*)")
    GEM_PATTERN = re.compile(r"""^\s*gem\s*\(?\s*['"]([^'"]+)['"]""", re.MULTILINE)

    def __init__(self) -> None:
        """Initialize the detector."""
        self.logger = get_logger(__name__)

    def detect(self, source_path: Path | None = None) -> TechStack:
        """Detect technology stack from a project's manifest files.

        Args:
            source_path: Project directory. Defaults to the working directory.

        Returns:
            Detected technology stack. Never raises for manifest content.
        """
        source_path = Path(source_path) if source_path else Path.cwd()
        labels: list[str] = []
        manifests: list[str] = []

        self.logger.debug(f"Detecting tech stack in {source_path}")

        for detect_step in (
            self._detect_javascript,
            self._detect_php,
            self._detect_python,
            self._detect_ruby,
            self._detect_go,
            self._detect_rust,
            self._detect_jvm,
        ):
            found_labels, found_manifests = detect_step(source_path)
            labels.extend(found_labels)
            manifests.extend(found_manifests)

        stack = TechStack(
            labels=sort_labels(labels),
            manifests=manifests,
            source_path=str(source_path),
        )

        self.logger.debug(
            f"Detected {len(stack.labels)} technologies from {len(manifests)} manifests"
        )

        return stack

    def _detect_javascript(self, source_path: Path) -> tuple[list[str], list[str]]:
        """Detect JavaScript frameworks and tooling from package.json.

        Args:
            source_path: Project directory.

        Returns:
            Tuple of (labels, manifests found).
        """
        manifest = source_path / "package.json"
        if not manifest.is_file():
            return [], []

        data = self._load_json(manifest)
        deps = self._collect_mapping_keys(data, self.NPM_DEPENDENCY_KEYS)

        labels = self._match_rules(deps, self.NPM_RULES)
        labels.append("JavaScript/Node.js")
        return labels, [manifest.name]

    def _detect_php(self, source_path: Path) -> tuple[list[str], list[str]]:
        """Detect PHP frameworks from composer.json.

        Args:
            source_path: Project directory.

        Returns:
            Tuple of (labels, manifests found).
        """
        manifest = source_path / "composer.json"
        if not manifest.is_file():
            return [], []

        data = self._load_json(manifest)
        packages = [p.lower() for p in self._collect_mapping_keys(data, ["require", "require-dev"])]

        labels = self._match_rules(packages, self.COMPOSER_RULES)
        labels.append("PHP")
        return labels, [manifest.name]

    def _detect_python(self, source_path: Path) -> tuple[list[str], list[str]]:
        """Detect Python frameworks from requirements.txt and pyproject.toml.

        Args:
            source_path: Project directory.

        Returns:
            Tuple of (labels, manifests found).
        """
        manifests = [name for name in self.PYTHON_MANIFESTS if (source_path / name).is_file()]
        if not manifests:
            return [], []

        packages: set[str] = set()
        if "requirements.txt" in manifests:
            packages.update(self._parse_requirements_txt(source_path / "requirements.txt"))
        if "pyproject.toml" in manifests:
            packages.update(self._parse_pyproject_toml(source_path / "pyproject.toml"))

        labels = [label for label, name in self.PYTHON_RULES.items() if name in packages]
        labels.append("Python")
        return labels, manifests

    def _detect_ruby(self, source_path: Path) -> tuple[list[str], list[str]]:
        """Detect Ruby frameworks from the Gemfile.

        Args:
            source_path: Project directory.

        Returns:
            Tuple of (labels, manifests found).
        """
        manifest = source_path / "Gemfile"
        if not manifest.is_file():
            return [], []

        content = self._read_text(manifest)
        gems = {gem.lower() for gem in self.GEM_PATTERN.findall(content or "")}

        labels = [label for label, name in self.RUBY_RULES.items() if name in gems]
        labels.append("Ruby")
        return labels, [manifest.name]

    def _detect_go(self, source_path: Path) -> tuple[list[str], list[str]]:
        """Detect Go modules."""
        if (source_path / "go.mod").is_file():
            return ["Go"], ["go.mod"]
        return [], []

    def _detect_rust(self, source_path: Path) -> tuple[list[str], list[str]]:
        """Detect Rust crates."""
        if (source_path / "Cargo.toml").is_file():
            return ["Rust"], ["Cargo.toml"]
        return [], []

    def _detect_jvm(self, source_path: Path) -> tuple[list[str], list[str]]:
        """Detect Java/Kotlin build systems.

        Args:
            source_path: Project directory.

        Returns:
            Tuple of (labels, manifests found).
        """
        labels: list[str] = []
        manifests = [name for name in self.GRADLE_MANIFESTS if (source_path / name).is_file()]
        if manifests:
            labels.append("Gradle")
        if (source_path / "pom.xml").is_file():
            labels.append("Maven")
            manifests.append("pom.xml")

        if labels:
            labels.append("Java/Kotlin")
        return labels, manifests

    def _match_rules(
        self,
        packages: list[str],
        rules: dict[str, dict[str, list[str]]],
    ) -> list[str]:
        """Match package names against label rules.

        Args:
            packages: Dependency names declared in a manifest.
            rules: Label -> {"packages", "prefixes", "contains"} rule table.

        Returns:
            Matching labels in rule order.
        """
        labels: list[str] = []

        for label, rule in rules.items():
            exact = set(rule.get("packages", []))
            prefixes = tuple(rule.get("prefixes", []))
            fragments = rule.get("contains", [])

            for package in packages:
                if (
                    package in exact
                    or (prefixes and package.startswith(prefixes))
                    or any(fragment in package for fragment in fragments)
                ):
                    labels.append(label)
                    break

        return labels

    def _collect_mapping_keys(self, data: Any, sections: list[str]) -> list[str]:
        """Collect keys of the named mapping sections of a parsed manifest."""
        if not isinstance(data, dict):
            return []

        keys: list[str] = []
        for section in sections:
            value = data.get(section)
            if isinstance(value, dict):
                keys.extend(str(k) for k in value)
        return keys

    def _parse_requirements_txt(self, file_path: Path) -> set[str]:
        """Parse distribution names from a requirements.txt file.

        Args:
            file_path: Path to requirements.txt.

        Returns:
            Normalized distribution names.
        """
        names: set[str] = set()
        content = self._read_text(file_path)
        if content is None:
            return names

        for raw_line in content.splitlines():
            line = raw_line.split(" #", 1)[0].strip()
            # Options (-r, -e, --index-url ...) and comments declare no names
            if not line or line.startswith(("#", "-")):
                continue
            name = self._requirement_name(line)
            if name:
                names.add(name)

        return names

    def _parse_pyproject_toml(self, file_path: Path) -> set[str]:
        """Parse distribution names from a pyproject.toml file.

        Covers PEP 621 dependencies and optional dependencies, and Poetry's
        dependency tables including dependency groups.

        Args:
            file_path: Path to pyproject.toml.

        Returns:
            Normalized distribution names.
        """
        names: set[str] = set()
        content = self._read_text(file_path)
        if content is None:
            return names

        try:
            data = tomllib.loads(content)
        except tomllib.TOMLDecodeError as e:
            self.logger.warning(f"Could not parse {file_path.name}: {e}")
            return names

        project = self._table(data, "project")
        requirements: list[Any] = []
        if isinstance(project.get("dependencies"), list):
            requirements.extend(project["dependencies"])
        for extra in self._table(project, "optional-dependencies").values():
            if isinstance(extra, list):
                requirements.extend(extra)

        for requirement in requirements:
            name = self._requirement_name(str(requirement))
            if name:
                names.add(name)

        poetry = self._table(self._table(data, "tool"), "poetry")
        poetry_tables = [
            self._table(poetry, "dependencies"),
            self._table(poetry, "dev-dependencies"),
        ]
        for group in self._table(poetry, "group").values():
            if isinstance(group, dict):
                poetry_tables.append(self._table(group, "dependencies"))

        for table in poetry_tables:
            names.update(normalize_package_name(str(k)) for k in table)

        return names

    @staticmethod
    def _table(data: Any, key: str) -> dict[str, Any]:
        """Return data[key] when it is a table, else an empty dict."""
        value = data.get(key) if isinstance(data, dict) else None
        return value if isinstance(value, dict) else {}

    def _requirement_name(self, requirement: str) -> str | None:
        """Extract the normalized name from a PEP 508 requirement string."""
        match = self.REQUIREMENT_NAME_PATTERN.match(requirement)
        if not match:
            return None
        return normalize_package_name(match.group(1))

    def _load_json(self, file_path: Path) -> Any:
        """Load a JSON manifest, returning None when it is unreadable.

        Args:
            file_path: Path to JSON file.

        Returns:
            Parsed document or None.
        """
        content = self._read_text(file_path)
        if content is None:
            return None

        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            self.logger.warning(f"Could not parse {file_path.name}: {e}")
            return None

    def _read_text(self, file_path: Path) -> str | None:
        """Read a manifest, logging instead of raising on failure."""
        try:
            return file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            self.logger.warning(f"Could not read {file_path.name}: {e}")
            return None
