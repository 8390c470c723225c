"""
Gallery Filtering

Search and category filtering over an already-fetched project list.
No database access happens here.
"""


def _field(project, name):
    if isinstance(project, dict):
        return project.get(name)
    return getattr(project, name, None)


def matches_search(project, search_term):
    """Case-insensitive substring match on title, student name or any technology."""
    term = (search_term or '').lower()
    if not term:
        return True

    if term in (_field(project, 'project_title') or '').lower():
        return True
    if term in (_field(project, 'student_name') or '').lower():
        return True
    return any(term in (tech or '').lower()
               for tech in (_field(project, 'tools_technologies') or []))


def filter_projects(projects, search_term='', category=''):
    """Return the projects passing both the search and the category filter.

    Empty filters pass everything. Terms are used as given, whitespace
    included. Category is an exact match. Input order is preserved.
    """
    filtered = []
    for project in projects:
        if not matches_search(project, search_term):
            continue
        if category and _field(project, 'category') != category:
            continue
        filtered.append(project)
    return filtered
