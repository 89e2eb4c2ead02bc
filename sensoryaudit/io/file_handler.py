"""File handling utilities."""

import json
import yaml
from pathlib import Path
from typing import Any, Dict, List, Union
from docx import Document as DocxDocument
import markdown

from ..core.models import AuditResult


ARTIFACT_FILES = {
    "audit_report_md": "audit_report.md",
    "enrichment_toolkit_md": "enrichment_toolkit.md",
    "revisions_md": "revisions.md",
    "roadmap_csv": "roadmap.csv",
    "interactive_map_html": "interactive_map.html",
}


class FileHandler:
    """Handles reading manuscripts and configs, and writing audit artifacts."""

    def read_file(self, file_path: Union[str, Path]) -> str:
        """Read text content from various file formats."""
        path = Path(file_path)

        if path.suffix.lower() == '.docx':
            return self._read_docx(path)
        else:
            # .md and .txt are both read as plain text
            return path.read_text(encoding='utf-8')

    def write_file(self, file_path: Union[str, Path], content: str) -> None:
        """Write content to file."""
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding='utf-8')

    def read_json(self, file_path: Union[str, Path]) -> Any:
        """Read JSON file."""
        path = Path(file_path)
        with path.open('r', encoding='utf-8') as f:
            return json.load(f)

    def write_json(self, file_path: Union[str, Path], data: Dict[str, Any]) -> None:
        """Write JSON file."""
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open('w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def read_yaml(self, file_path: Union[str, Path]) -> Any:
        """Read YAML file."""
        path = Path(file_path)
        with path.open('r', encoding='utf-8') as f:
            return yaml.safe_load(f)

    def read_config(self, file_path: Union[str, Path]) -> Dict[str, Any]:
        """Read a baseline/config file as JSON or YAML depending on suffix."""
        path = Path(file_path)
        if path.suffix.lower() == '.json':
            data = self.read_json(path)
        else:
            data = self.read_yaml(path)

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Expected a mapping at the top of {path}")
        return data

    def markdown_to_html(self, text: str) -> str:
        """Render a markdown artifact as an HTML fragment."""
        return markdown.markdown(text)

    def write_artifacts(
        self,
        result: AuditResult,
        out_dir: Union[str, Path],
        html: bool = False,
    ) -> List[Path]:
        """
        Write every report artifact plus the full JSON payload to ``out_dir``.

        Args:
            result: A finished audit with artifacts synthesized
            out_dir: Directory to write into (created if missing)
            html: Also render each markdown artifact to a sibling .html file

        Returns:
            Paths written, in a stable order
        """
        if result.artifacts is None:
            raise ValueError("Audit result has no synthesized artifacts")

        out = Path(out_dir)
        artifacts = result.artifacts.to_dict()
        written = []

        for key, filename in ARTIFACT_FILES.items():
            path = out / filename
            self.write_file(path, artifacts[key])
            written.append(path)

            if html and filename.endswith('.md'):
                html_path = path.with_suffix('.html')
                self.write_file(html_path, self.markdown_to_html(artifacts[key]))
                written.append(html_path)

        json_path = out / "audit.json"
        self.write_json(json_path, result.to_dict())
        written.append(json_path)

        return written

    def _read_docx(self, path: Path) -> str:
        """Read DOCX file."""
        doc = DocxDocument(path)
        return '\n'.join(paragraph.text for paragraph in doc.paragraphs)
