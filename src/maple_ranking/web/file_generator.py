"""
File generation orchestration for the Maple ranking dashboard.
Coordinates data processing and templates to write the complete web interface.
"""

from pathlib import Path
from typing import Dict, Any, List, Optional

from .templates.html_templates import get_main_html_template
from .templates.css_styles import get_css_content
from .templates.javascript_ui import get_javascript_content
from .data_processing import generate_all_dashboard_data


def generate_web_ui_files(data: Dict[str, Any], output_dir: Path) -> List[Path]:
    """Generate all web UI files (HTML, CSS, JS) from data."""
    print("Generating web UI files...")

    output_dir.mkdir(parents=True, exist_ok=True)

    contents = {
        "index.html": get_main_html_template(),
        "styles.css": get_css_content(),
        "script.js": get_javascript_content(data),
    }

    written = []
    for filename, content in contents.items():
        path = output_dir / filename
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        print(f"  Generated: {path}")
        written.append(path)

    print("✅ Web UI files generated successfully")
    return written


def generate_complete_web_ui(sources: List[str], output_dir: Path,
                             config: Optional[Dict[str, Any]] = None,
                             selected_name: str = "",
                             max_workers: int = 4) -> Dict[str, Any]:
    """Generate complete web UI with all data and files."""
    print("🚀 Starting complete web UI generation...")

    # Step 1: Fetch and aggregate every source
    data = generate_all_dashboard_data(sources, config, selected_name, max_workers)

    # Step 2: Write the page
    generate_web_ui_files(data, output_dir)

    print("🎉 Complete web UI generation finished!")
    return data
