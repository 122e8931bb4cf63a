"""
HTML page assembly for documentation sections.
"""

import html


class HTMLGeneratorMixin:
    """Mixin wrapping rendered sections into a standalone HTML page."""

    def _sections_to_html(self, entries) -> str:
        """Build the page from ``(anchor, heading, sections)`` entries."""
        html_lines = [
            "<!DOCTYPE html>", "<html lang='en'>", "<head>", "    <meta charset='UTF-8'>",
            "    <meta name='viewport' content='width=device-width, initial-scale=1.0'>",
            f"    <title>{html.escape(self.config.page_title)}</title>",
            "    <style>", self._get_default_css(), "    </style>", "</head>", "<body>",
            "    <div class='container'>",
            f"        <h1>{html.escape(self.config.page_title)}</h1>",
        ]
        if entries:
            html_lines.append("        <ul class='toc'>")
            for anchor, heading, _ in entries:
                html_lines.append(f"            <li><a href='#{anchor}'>{html.escape(heading)}</a></li>")
            html_lines.append("        </ul>")
        for anchor, heading, sections in entries:
            html_lines.append(f"        <section id='{anchor}'>")
            html_lines.append(f"            <h2>{html.escape(heading)}</h2>")
            for section in sections:
                html_lines.append(f"            <h3>{html.escape(section.title)}</h3>")
                html_lines.append(section.description)
            html_lines.append("        </section>")
        html_lines.extend(["    </div>", "</body>", "</html>"])
        return '\n'.join(html_lines) + '\n'

    def _get_default_css(self) -> str:
        """Get default CSS for HTML."""
        if self.config.custom_css: return self.config.custom_css
        return """
        body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; line-height: 1.6; color: #333; max-width: 1200px; margin: 0 auto; padding: 20px; }
        .container { background: white; padding: 40px; border-radius: 8px; box-shadow: 0 2px 10px rgba(0,0,0,0.1); }
        h1, h2, h3 { color: #2c3e50; margin-top: 2em; margin-bottom: 1em; }
        h1 { border-bottom: 3px solid #3498db; padding-bottom: 10px; }
        h2 { border-bottom: 2px solid #ecf0f1; padding-bottom: 8px; }
        pre.code { background: #f8f9fa; padding: 15px; border-radius: 5px; overflow-x: auto; border-left: 4px solid #3498db; font-family: 'Monaco', 'Consolas', monospace; }
        pre.code a { color: inherit; }
        .keyword { color: #8e44ad; }
        .identifier { color: #2c3e50; font-weight: 600; }
        .support.type { color: #2980b9; text-decoration: none; }
        .variable.parameter { color: #d35400; }
        .variable.language { color: #c0392b; }
        .meta { color: #16a085; }
        .string { color: #27ae60; }
        .comment { color: #95a5a6; font-style: italic; }
        """
