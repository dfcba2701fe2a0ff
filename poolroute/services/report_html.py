"""
Print-ready HTML for the weekly and chemical usage reports.
All record text is escaped before it is embedded.
"""

from datetime import datetime

from ..shared.calendar import parse_service_date
from ..utils.sanitization import sanitize_multiline, sanitize_string
from .reports import ChemicalUsageReport, WeeklyReport

# Report theme colors - Teal/Slate color scheme
THEME = {
    "primary": "#0d9488",
    "primary_light": "#ccfbf1",
    "background": "#ffffff",
    "text_primary": "#0f172a",
    "text_secondary": "#334155",
    "text_muted": "#64748b",
    "border": "#e2e8f0",
    "row_alt": "#f8fafc",
    "level_low": "#fef3c7",
    "level_good": "#d1fae5",
    "level_high": "#fee2e2",
    "level_critical": "#fecaca",
}


def _base_styles() -> str:
    return f"""
      body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
             color: {THEME['text_primary']}; background: {THEME['background']};
             margin: 0; padding: 24px; font-size: 12px; }}
      .header {{ border-bottom: 3px solid {THEME['primary']}; padding-bottom: 12px; margin-bottom: 20px; }}
      .header h1 {{ margin: 0 0 6px 0; font-size: 22px; color: {THEME['primary']}; }}
      .header p {{ margin: 2px 0; color: {THEME['text_secondary']}; }}
      .section {{ margin-bottom: 20px; page-break-inside: avoid; }}
      .section-header {{ display: flex; justify-content: space-between; align-items: baseline;
                         background: {THEME['primary_light']}; padding: 6px 10px; border-radius: 4px; }}
      .section-header h2 {{ margin: 0; font-size: 15px; }}
      .section-header span {{ color: {THEME['text_muted']}; }}
      .subtitle {{ color: {THEME['text_muted']}; margin: 4px 10px; }}
      table {{ width: 100%; border-collapse: collapse; margin-top: 6px; }}
      th {{ text-align: left; border-bottom: 2px solid {THEME['border']}; padding: 6px; font-size: 11px; }}
      td {{ border-bottom: 1px solid {THEME['border']}; padding: 6px; vertical-align: top; }}
      tr:nth-child(even) td {{ background: {THEME['row_alt']}; }}
      .level-low {{ background: {THEME['level_low']}; text-align: center; font-weight: 600; }}
      .level-good {{ background: {THEME['level_good']}; text-align: center; font-weight: 600; }}
      .level-high {{ background: {THEME['level_high']}; text-align: center; font-weight: 600; }}
      .level-critical {{ background: {THEME['level_critical']}; text-align: center; font-weight: 700; }}
      .no-service {{ color: {THEME['text_muted']}; font-style: italic; margin: 6px 10px; }}
      .notes-cell {{ color: {THEME['text_secondary']}; }}
      .chem-pill {{ background: {THEME['primary_light']}; border-radius: 9999px; padding: 2px 8px; }}
      @media print {{ body {{ padding: 0; }} }}
    """


def _document(title: str, heading: str, subtitle: str, generated_at: datetime, body: str) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="utf-8">
    <title>{sanitize_string(title)}</title>
    <style>{_base_styles()}</style>
  </head>
  <body>
    <div class="header">
      <h1>{heading}</h1>
      <p>{subtitle}</p>
      <p><strong>Generated:</strong> {generated_at.strftime("%b %d, %Y %I:%M %p")}</p>
    </div>
    {body}
  </body>
</html>
"""


def _level_cell(value) -> str:
    if not value:
        return "<td>-</td>"
    text = sanitize_string(value)
    return f'<td class="level-{text}">{text.upper()}</td>'


def format_salt(salt) -> str:
    return f"{salt:g} PPM" if salt else "-"


def format_report_date(value) -> str:
    """Human date for a stored YYYY-MM-DD; unparsable values are shown as-is"""
    parsed = parse_service_date(value)
    if parsed is None:
        return sanitize_string(value) or "-"
    return parsed.strftime("%b %d, %Y")


def services_label(count: int) -> str:
    return f"{count} service{'' if count == 1 else 's'}"


def entries_label(count: int) -> str:
    return f"{count} entr{'y' if count == 1 else 'ies'}"


def render_weekly_report(report: WeeklyReport, generated_at: datetime) -> str:
    start, end = report.window.start, report.window.end
    period = f"{start.strftime('%b %d')} to {end.strftime('%b %d, %Y')}"

    sections = []
    for section in report.sections:
        if section.rows:
            rows = "".join(
                f"""
              <tr>
                <td><strong>{sanitize_string(row.customer.full_name)}</strong><br>
                    <span class="subtitle">{sanitize_string(row.customer.address)}</span></td>
                {_level_cell(row.log.ph)}
                {_level_cell(row.log.chlorine)}
                {_level_cell(row.log.stabilizer)}
                <td style="text-align: center;">{format_salt(row.log.salt)}</td>
                <td class="notes-cell">{sanitize_multiline(row.log.notes) or '-'}</td>
              </tr>"""
                for row in section.rows
            )
            content = f"""
          <table>
            <thead>
              <tr>
                <th style="width: 22%;">Customer</th>
                <th style="width: 10%;">pH</th>
                <th style="width: 10%;">Chlorine</th>
                <th style="width: 10%;">Cyanuric Acid</th>
                <th style="width: 10%;">Salt</th>
                <th style="width: 38%;">Notes</th>
              </tr>
            </thead>
            <tbody>{rows}
            </tbody>
          </table>"""
        else:
            content = '<p class="no-service">No services recorded for this day</p>'

        sections.append(
            f"""
        <div class="section">
          <div class="section-header">
            <h2>{section.day}</h2>
            <span>{services_label(section.count)}</span>
          </div>
          {content}
        </div>"""
        )

    subtitle = f"<strong>Week:</strong> {period} &bull; <strong>Total:</strong> {services_label(report.total_serviced)}"
    return _document(
        title=f"Weekly Service Report - {period}",
        heading="🌊 Weekly Service Report",
        subtitle=subtitle,
        generated_at=generated_at,
        body="".join(sections),
    )


def render_chemical_usage_report(report: ChemicalUsageReport, generated_at: datetime) -> str:
    month = report.window.start.strftime("%B %Y")

    if report.sections:
        sections = []
        for section in report.sections:
            rows = "".join(
                f"""
              <tr>
                <td>{format_report_date(record.created_date)}</td>
                <td><span class="chem-pill">{sanitize_string(record.chemical_type) or 'Unknown'}</span></td>
                <td>{sanitize_string(record.quantity) or '-'}</td>
                <td class="notes-cell">{sanitize_multiline(record.notes) or '-'}</td>
              </tr>"""
                for record in section.records
            )
            address = (
                f'<p class="subtitle">{sanitize_string(section.customer_address)}</p>'
                if section.customer_address
                else ""
            )
            sections.append(
                f"""
        <div class="section">
          <div class="section-header">
            <h2>{sanitize_string(section.customer_name)}</h2>
            <span>{entries_label(section.count)}</span>
          </div>
          {address}
          <table>
            <thead>
              <tr>
                <th style="width: 22%;">Date</th>
                <th style="width: 28%;">Chemical</th>
                <th style="width: 12%;">Qty</th>
                <th style="width: 38%;">Notes</th>
              </tr>
            </thead>
            <tbody>{rows}
            </tbody>
          </table>
        </div>"""
            )
        body = "".join(sections)
    else:
        body = '<p class="no-service">No chemical usage recorded for this month</p>'

    return _document(
        title=f"Chemical Usage Report - {month}",
        heading="Monthly Chemical Usage",
        subtitle=f"<strong>Month:</strong> {month} &bull; <strong>Total:</strong> {entries_label(report.total_entries)}",
        generated_at=generated_at,
        body=body,
    )
