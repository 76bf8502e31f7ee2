import datetime

from ssb_api.constants import CITATION_DETAILS


def _format_access_date(access_date: str = None, today: datetime.date = None) -> str:
    """
    Return access_date, or the given/current day as 'D Month YYYY' for cite web.
    """
    if access_date:
        return access_date
    day = today or datetime.date.today()
    return f"{day.day} {day:%B %Y}"


def _ensure_template_closed(template: str) -> str:
    """Normalize a formatted cite template to exactly one pair of outer braces."""
    body = template.strip().lstrip("{").rstrip("}").strip()
    return "{{" + body + "}}"


def build_ssb_ref(url: str = None, access_date: str = None) -> str:
    """
    Build a full <ref>...</ref> citation for the SSB population dataset.
    """
    detail = CITATION_DETAILS
    template = detail["template"].format(
        title=detail["title"],
        url=url or detail["default_url"],
        access_date=_format_access_date(access_date),
    )
    return f'<ref name="{detail["name"]}">{_ensure_template_closed(template)}</ref>'


__all__ = ["build_ssb_ref"]
