# # HTML shell: wraps rendered widgets in the fixed document page.

from __future__ import annotations

from ..themes import PageTheme


def build_css() -> str:
    # # Keep this centralized so templates don't duplicate base classes
    return """
            body {
                font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
                line-height: 1.6;
                color: #333;
                max-width: 800px;
                margin: 0 auto;
                padding: 20px;
                background-color: #f5f5f5;
            }
            .widget {
                margin-bottom: 30px;
                padding: 20px;
                border-left: 4px solid #3498db;
                background-color: #f9f9f9;
            }
            .widget-title { font-size: 1.5em; color: #2c3e50; margin-bottom: 15px; }
            .widget-field { margin-bottom: 10px; }
            .field-label { font-weight: bold; color: #555; margin-right: 8px; }
            .field-value { color: #333; }
            .alert-widget { border-left-color: #e74c3c; background-color: #fef5f5; }
            .info-widget { border-left-color: #3498db; background-color: #f0f8ff; }
            .warning-widget { border-left-color: #f39c12; background-color: #fffbf0; }
"""


def wrap_page(title: str, subtitle: str, body_html: str, footer: str, theme: PageTheme) -> str:
    # # title/subtitle must already be escaped by the caller
    css = build_css()
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <link rel="preconnect" href="https://fonts.googleapis.com">
    <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
    <link href="https://fonts.googleapis.com/css2?family=Ubuntu:wght@400;500;700&display=swap" rel="stylesheet">
    <style>{css}</style>
</head>
<body style="font-family: 'Ubuntu', Arial, sans-serif; background: linear-gradient(135deg, {theme.primary} 0%, {theme.primary_light} 100%); color: #333; line-height: 1.6; padding: 20px; min-height: 100vh; margin: 0;">
    <div style="max-width: 1000px; margin: 0 auto; background: #fff; box-shadow: 0 20px 60px rgba(0, 0, 0, 0.3); border-radius: 12px; overflow: hidden;">
        <div style="background: linear-gradient(135deg, {theme.primary} 0%, #003ab8 100%); color: #fff; padding: 50px 40px; text-align: center; border-top: 6px solid; border-image: linear-gradient(90deg, {theme.gold} 0%, {theme.red} 50%, {theme.gold} 100%) 1;">
            <h1 style="font-size: clamp(1.5em, 5vw, 2.8em); margin: 0 0 10px 0; font-weight: 800; text-transform: uppercase; letter-spacing: 2px; color: #fff;">{title}</h1>
            <p style="font-size: clamp(1em, 2.5vw, 1.3em); font-weight: 500; margin: 0; color: {theme.gold};">{subtitle}</p>
        </div>
        <div style="padding: 40px;">
{body_html}
        </div>
        <div style="background: linear-gradient(135deg, #f5f5f5 0%, #e8e8e8 100%); padding: 30px; text-align: center; font-size: 1em; color: #666; border-top: 6px solid; border-image: linear-gradient(90deg, {theme.gold} 0%, {theme.red} 50%, {theme.primary} 100%) 1;">
            <p style="margin: 0;">{footer}</p>
        </div>
    </div>
</body>
</html>
"""
