"""
HTML pages. Plain server-rendered markup, every dynamic value escaped.
"""

from html import escape
from typing import Iterable, List, Optional, Tuple

from core.domain.constants import ALL_EVENTS
from core.domain.models import Application, ApplicationStatus, Event, EventStatus, RegistrationDraft
from core.services.admin_service import AdminDashboard
from adapters.web.state import AppState, AppView, Notification
from locales import t

STYLE = """
  body { font-family: -apple-system, BlinkMacSystemFont, sans-serif; margin: 0; background: #0d1117; color: #e6edf3; }
  main { max-width: 960px; margin: 0 auto; padding: 16px; }
  nav { display: flex; justify-content: space-between; align-items: center; padding: 12px 16px; border-bottom: 1px solid #30363d; }
  nav form { display: inline; }
  h1 { font-size: 1.6em; } h2 { font-size: 1.2em; border-bottom: 1px solid #30363d; padding-bottom: 8px; }
  .hero { text-align: center; padding: 48px 16px; }
  .card { background: #161b22; border: 1px solid #30363d; border-radius: 8px; padding: 16px; margin-bottom: 12px; }
  .cards { display: grid; grid-template-columns: repeat(auto-fit, minmax(180px, 1fr)); gap: 12px; }
  .big { font-size: 2em; font-weight: bold; color: #58a6ff; }
  .label, .muted { color: #8b949e; }
  .row { display: flex; justify-content: space-between; align-items: center; gap: 8px; margin: 4px 0; }
  label { display: block; margin: 10px 0 4px; }
  input, select, textarea { width: 100%; box-sizing: border-box; padding: 8px; background: #0d1117; color: #e6edf3; border: 1px solid #30363d; border-radius: 6px; }
  input[type=checkbox] { width: auto; }
  button { padding: 8px 14px; border-radius: 6px; border: 1px solid #30363d; background: #238636; color: #fff; cursor: pointer; }
  button.ghost { background: transparent; }
  button.danger { background: #da3633; }
  button:disabled { background: #30363d; cursor: not-allowed; }
  table { width: 100%; border-collapse: collapse; }
  th, td { text-align: left; padding: 6px 8px; border-bottom: 1px solid #21262d; }
  .badge { padding: 2px 8px; border-radius: 999px; font-size: 0.8em; }
  .badge-open, .badge-approved { background: #238636; }
  .badge-upcoming { background: #1f6feb; }
  .badge-closed { background: #484f58; }
  .badge-pending { background: #9e6a03; }
  .badge-rejected { background: #da3633; }
  .toast { border-radius: 8px; padding: 12px 16px; margin-bottom: 8px; background: #1f6feb33; border: 1px solid #1f6feb; }
  .toast.destructive { background: #da363333; border-color: #da3633; }
"""


def _badge(value: str) -> str:
    return f'<span class="badge badge-{escape(value)}">{escape(value)}</span>'


def _date(event_dt) -> str:
    return event_dt.strftime("%Y-%m-%d")


def _toasts(notifications: Iterable[Notification]) -> str:
    items = ""
    for n in notifications:
        variant = " destructive" if n.variant == "destructive" else ""
        message = f"<div>{escape(n.message)}</div>" if n.message else ""
        items += f'<div class="toast{variant}" role="status"><strong>{escape(n.title)}</strong>{message}</div>\n'
    return items


def _nav(state: AppState) -> str:
    admin_button = ""
    if state.is_logged_in:
        admin_button = (
            '<form method="post" action="/navigate">'
            '<input type="hidden" name="view" value="admin">'
            f'<button class="ghost" type="submit">{t("nav_admin")}</button></form>'
        )
    if state.is_logged_in:
        session_button = (
            '<form method="post" action="/logout">'
            f'<button class="ghost" type="submit">{t("nav_logout")}</button></form>'
        )
    else:
        session_button = (
            '<form method="post" action="/navigate">'
            '<input type="hidden" name="view" value="login">'
            f'<button type="submit">{t("nav_login")}</button></form>'
        )
    return f"""<nav>
  <div><strong>{t("site_title")}</strong>
    <form method="post" action="/navigate"><input type="hidden" name="view" value="registration">
    <button class="ghost" type="submit">{t("nav_register")}</button></form>
    {admin_button}
  </div>
  <div>{session_button}</div>
</nav>"""


def layout(state: AppState, body: str, title: Optional[str] = None) -> str:
    """Wrap a page body. Pending notifications are consumed here."""
    nav = "" if state.current_view == AppView.LOGIN else _nav(state)
    toasts = _toasts(state.pop_notifications())
    return f"""<!DOCTYPE html>
<html><head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{escape(title or t("site_title"))}</title>
<style>{STYLE}</style>
</head><body>
{nav}
<main>
{toasts}
{body}
</main>
</body></html>"""


# === REGISTRATION ===

def registration_page(
    events: List[Tuple[Event, EventStatus]],
    draft: RegistrationDraft,
) -> str:
    selected_status = None
    options = '<option value="">Select an event</option>\n'
    for event, status in events:
        selected = ""
        if event.id == draft.selected_event:
            selected = " selected"
            selected_status = status
        options += (
            f'<option value="{escape(event.id)}"{selected}>'
            f'{escape(event.name)} ({status.value})</option>\n'
        )
    can_register = selected_status == EventStatus.OPEN

    members = ""
    for index, member in enumerate(draft.group_members):
        placeholder = t("registration_member_placeholder", index=index + 1)
        if index == 0:
            placeholder += t("registration_leader_suffix")
        remove = ""
        if index > 0:
            remove = (
                f'<button class="ghost" type="submit" name="action" '
                f'value="remove_member:{index}" aria-label="Remove member {index + 1}">&minus;</button>'
            )
        members += (
            f'<div class="row"><input name="member" value="{escape(member)}" '
            f'placeholder="{escape(placeholder)}">{remove}</div>\n'
        )

    submit_label = t("registration_submit") if can_register else t("registration_unavailable_button")
    no_events = f'<p class="muted">{t("registration_no_events")}</p>' if not events else ""

    return f"""<section class="hero">
  <h1>{t("site_title")}</h1>
  <p class="muted">{t("site_tagline")}</p>
</section>
<section id="registration-form" class="card">
  <h2>{t("registration_header")}</h2>
  <p class="muted">{t("registration_form_hint")}</p>
  {no_events}
  <form method="post" action="/register">
    <label for="event">Choose Event *</label>
    <select id="event" name="selected_event">{options}</select>

    <label for="projectName">Project Name *</label>
    <input id="projectName" name="project_name" value="{escape(draft.project_name)}" placeholder="Enter your project name">

    <label for="university">University *</label>
    <input id="university" name="university" value="{escape(draft.university)}" placeholder="University name">

    <label for="problemStatement">Problem Statement *</label>
    <textarea id="problemStatement" name="problem_statement" placeholder="Describe the problem your project aims to solve">{escape(draft.problem_statement)}</textarea>

    <label for="solution">Proposed Solution *</label>
    <textarea id="solution" name="solution" placeholder="Explain your solution approach">{escape(draft.solution)}</textarea>

    <label for="email">Group Leader Email *</label>
    <input id="email" type="email" name="leader_email" value="{escape(draft.leader_email)}" placeholder="leader@university.edu">

    <label for="phone">Group Leader Phone *</label>
    <input id="phone" type="tel" name="leader_phone" value="{escape(draft.leader_phone)}" placeholder="+1 (555) 123-4567">

    <div class="row"><label>Group Members ({draft.group_size})</label>
      <button class="ghost" type="submit" name="action" value="add_member">{t("registration_add_member")}</button></div>
    {members}
    <p><button type="submit" name="action" value="submit">{submit_label}</button></p>
  </form>
</section>"""


# === LOGIN ===

def login_page() -> str:
    return f"""<section class="card" style="max-width: 420px; margin: 48px auto;">
  <h1>{t("login_header")}</h1>
  <p class="muted">{t("login_subheader")}</p>
  <form method="post" action="/login">
    <label for="email">Email</label>
    <input id="email" type="email" name="email" placeholder="Enter email" required>
    <label for="password">Password</label>
    <input id="password" type="password" name="password" placeholder="Enter password" required>
    <p class="row"><button type="submit">Login</button></p>
  </form>
  <form method="post" action="/login/cancel"><button class="ghost" type="submit">Cancel</button></form>
</section>"""


# === ADMIN ===

def _summary_cards(dashboard: AdminDashboard) -> str:
    s = dashboard.summary
    cards = [
        (t("admin_total_applications"), s.total_applications),
        (t("admin_open_events"), s.open_events),
        (t("admin_upcoming_events"), s.upcoming_events),
        (t("admin_avg_group_size"), f"{s.average_group_size:.1f}"),
    ]
    return "".join(
        f'<div class="card"><div class="big">{value}</div><div class="label">{label}</div></div>'
        for label, value in cards
    )


def _events_section(dashboard: AdminDashboard) -> str:
    rows = ""
    for stats in dashboard.events:
        event = stats.event
        event_id = escape(event.id)
        rows += f"""<div class="card">
  <div class="row"><strong>{escape(event.name)}</strong> {_badge(stats.status.value)}</div>
  <div class="muted">{_date(event.application_start_date)} &ndash; {_date(event.application_end_date)}</div>
  <div class="row"><span>Applications: {stats.application_count}</span><span>Avg group size: {stats.average_label}</span></div>
  <div class="row">
    <a href="/admin/events/{event_id}/edit"><button class="ghost" type="button">Edit</button></a>
    <form method="post" action="/admin/events/{event_id}/delete" onsubmit="return confirm('{t("admin_delete_confirm")}');">
      <button class="danger" type="submit">Delete</button></form>
  </div>
</div>\n"""
    return f"""<section>
  <div class="row"><h2>{t("admin_events_tab")}</h2>
    <a href="/admin/events/new"><button type="button">Add Event</button></a></div>
  {rows}
</section>"""


def _applications_section(dashboard: AdminDashboard) -> str:
    options = f'<option value="{ALL_EVENTS}">{t("admin_all_events")}</option>'
    for stats in dashboard.events:
        selected = " selected" if stats.event.id == dashboard.event_filter else ""
        options += f'<option value="{escape(stats.event.id)}"{selected}>{escape(stats.event.name)}</option>'

    filtered = ""
    if dashboard.filtered_summary is not None:
        filtered = f'<p class="muted">{t("admin_filtered_count", count=dashboard.filtered_summary.total_applications)}</p>'

    rows = ""
    for app in dashboard.applications:
        app_id = escape(app.id)
        actions = ""
        if app.status == ApplicationStatus.PENDING:
            actions = f"""<form method="post" action="/admin/applications/{app_id}/status">
        <button type="submit" name="status" value="approved">Approve</button>
        <button class="danger" type="submit" name="status" value="rejected">Reject</button></form>"""
        created = app.created_at.strftime("%Y-%m-%d %H:%M") if app.created_at else ""
        rows += f"""<tr>
  <td><a href="/admin/applications/{app_id}">{escape(app.project_name)}</a>
    <div class="muted">{escape(dashboard.event_names.get(app.event_id, app.event_id))}</div></td>
  <td>{escape(app.university or "")}</td>
  <td>{app.group_size}</td>
  <td>{escape(app.group_leader_email or "")}<div class="muted">{escape(app.group_leader_phone or "")}</div></td>
  <td>{_badge(app.status.value)}</td>
  <td class="muted">{created}</td>
  <td>{actions}</td>
</tr>\n"""
    if not rows:
        rows = f'<tr><td colspan="7" class="muted">{t("admin_no_applications")}</td></tr>'

    return f"""<section>
  <h2>{t("admin_applications_tab")}</h2>
  <form method="get" action="/" class="row">
    <select name="event">{options}</select><button class="ghost" type="submit">Filter</button>
  </form>
  {filtered}
  <table>
    <tr><th>Project</th><th>University</th><th>Size</th><th>Leader</th><th>Status</th><th>Submitted</th><th></th></tr>
    {rows}
  </table>
</section>"""


def admin_page(dashboard: AdminDashboard) -> str:
    return f"""<h1>{t("admin_header")}</h1>
<p class="muted">{t("admin_subheader")}</p>
<div class="cards">{_summary_cards(dashboard)}</div>
{_events_section(dashboard)}
{_applications_section(dashboard)}"""


def application_detail_page(app: Application, event_name: Optional[str] = None) -> str:
    members = ""
    for index, member in enumerate(app.full_names):
        leader = f'<span class="badge badge-open">{t("application_team_leader")}</span>' if index == 0 else ""
        members += f'<div class="row card"><span>{escape(member)}</span>{leader}</div>\n'
    return f"""<section class="card">
  <h1>Project: {escape(app.project_name)}</h1>
  <p class="muted">{escape(event_name or app.event_id)} &middot; {_badge(app.status.value)}</p>
  <p class="muted">{t("application_members_hint")}</p>
  {members}
  <h2>Problem Statement</h2><p>{escape(app.problem_statement or "")}</p>
  <h2>Proposed Solution</h2><p>{escape(app.solution or "")}</p>
  <p>{escape(app.university or "")} &middot; {escape(app.group_leader_email or "")} &middot; {escape(app.group_leader_phone or "")}</p>
  <a href="/"><button class="ghost" type="button">Close</button></a>
</section>"""


def event_editor_page(values: dict, event_id: Optional[str] = None) -> str:
    """values: name, start_date, end_date (YYYY-MM-DD) and is_manually_closed"""
    action = f"/admin/events/{escape(event_id)}" if event_id else "/admin/events"
    header = t("event_edit_header") if event_id else t("event_new_header")
    checked = " checked" if values.get("is_manually_closed") else ""
    submit = "Update" if event_id else "Create"
    return f"""<section class="card" style="max-width: 480px; margin: 0 auto;">
  <h1>{header}</h1>
  <form method="post" action="{action}">
    <label for="name">Event Name</label>
    <input id="name" name="name" value="{escape(values.get("name", ""))}" placeholder="Event Name">
    <label for="start">Application Start</label>
    <input id="start" type="date" name="start_date" value="{escape(values.get("start_date", ""))}">
    <label for="end">Application End</label>
    <input id="end" type="date" name="end_date" value="{escape(values.get("end_date", ""))}">
    <label><input type="checkbox" id="closed" name="is_manually_closed"{checked}> Manually closed</label>
    <p class="row"><button type="submit">{submit}</button>
      <a href="/"><button class="ghost" type="button">Cancel</button></a></p>
  </form>
</section>"""


def event_form_values(event: Event) -> dict:
    return {
        "name": event.name,
        "start_date": _date(event.application_start_date),
        "end_date": _date(event.application_end_date),
        "is_manually_closed": event.is_manually_closed,
    }
