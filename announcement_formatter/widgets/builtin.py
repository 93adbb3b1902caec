# # Starter widgets used when the widget directory yields nothing.

from __future__ import annotations

from typing import Dict, List

from ..models import FieldType, WidgetDefinition, WidgetField


def _f(fid: str, label: str, ftype: FieldType = FieldType.STRING, default: str = "", required: bool = True, **kw) -> WidgetField:
    return WidgetField(id=fid, type=ftype, label=label, required=required, default_value=default, **kw)


def builtin_definitions() -> List[WidgetDefinition]:
    return [
        WidgetDefinition(
            id="meeting",
            display_name="Meeting",
            category="Events",
            description="Meeting announcement",
            template="meeting.html",
            fields=(
                _f("title", "Title", default="Staff Meeting"),
                _f("date", "Date", FieldType.DATE, "2026-01-15"),
                _f("time", "Time", default="10:00 AM"),
                _f("location", "Location", default="Conference Room"),
                _f("details", "Details", FieldType.MULTILINE, "Meeting details", required=False),
            ),
        ),
        WidgetDefinition(
            id="alert",
            display_name="Alert",
            category="Notices",
            description="Important alert",
            template="alert.html",
            fields=(
                _f("severity", "Severity", FieldType.DROPDOWN, "Important", options=("Low", "Medium", "Important", "Critical")),
                _f("title", "Title", default="Important Notice"),
                _f("message", "Message", FieldType.MULTILINE, "Alert message"),
                _f("action", "Action", FieldType.MULTILINE, "Please respond", required=False),
            ),
        ),
        WidgetDefinition(
            id="announcement",
            display_name="Announcement",
            category="General",
            description="General announcement",
            template="info.html",
            fields=(
                _f("title", "Title", default="Announcement"),
                _f("content", "Content", FieldType.MULTILINE, "Announcement text"),
                _f("date", "Date", FieldType.DATE, "2026-01-15", required=False),
            ),
        ),
        WidgetDefinition(
            id="regulation",
            display_name="Regulation",
            category="Policy",
            description="Regulation or policy update",
            template="regulation.html",
            fields=(
                _f("number", "Regulation #", default="CAP 60-1"),
                _f("title", "Title", default="Policy Update"),
                _f("effectiveDate", "Effective Date", FieldType.DATE, "2026-01-15"),
                _f("summary", "Summary", FieldType.MULTILINE, "Summary of changes"),
                _f("details", "Details", FieldType.MULTILINE, "Detailed information", required=False),
            ),
        ),
        WidgetDefinition(
            id="opportunity",
            display_name="Opportunity",
            category="Programs",
            description="Program or opportunity",
            template="info.html",
            fields=(
                _f("title", "Title", default="Training Program"),
                _f("content", "Description", FieldType.MULTILINE, "Program details"),
                _f("contact", "Contact", default="Wing Training Officer", required=False),
            ),
        ),
    ]


BUILTIN_TEMPLATES: Dict[str, str] = {
    "meeting.html": """
<div style="background: {{color_background}}; border-left: 4px solid {{color_primary}}; padding: 20px; margin: 0px 0px; border-radius: 8px;">
  <h2 style="color: {{color_primary}};">{{title}}</h2>
  <strong>{{date}} at {{time}}</strong>
  <p>Location: {{location}}</p>
  <p>{{details}}</p>
</div>""",
    "alert.html": """
<div style="background: rgba(186, 12, 47, 0.08); border: 2px solid #BA0C2F; padding: 20px; border-radius: 8px;">
  <h2 style="color: #BA0C2F;">{{severity}}: {{title}}</h2>
  <p>{{message}}</p>
  <strong>{{action}}</strong>
</div>""",
    "info.html": """
<div style="background: {{color_background}}; border: 1px solid {{color_primary}}; padding: 20px; border-radius: 8px;">
  <h2 style="color: {{color_primary}};">{{title}}</h2>
  <p>{{content}}</p>
  <p>{{date}}{{contact}}</p>
</div>""",
    "regulation.html": """
<div style="background: rgba(255, 249, 230, 1); border-left: 4px solid {{color_accent}}; padding: 20px; border-radius: 8px;">
  <h2 style="color: {{color_primary}};">{{number}}: {{title}}</h2>
  <strong>Effective {{effectiveDate}}</strong>
  <p>{{summary}}</p>
  <p>{{details}}</p>
</div>""",
}
