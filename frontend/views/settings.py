import streamlit as st
from utils.api import APIClient, error_message
from utils.formatters import format_code_label
from config import API_URL

api = APIClient(API_URL)

DOMAINS = {
    "Phases": "phases",
    "Positions": "positions",
    "Projects": "projects",
    "Roles": "roles",
}


def load_page(domain: str):
    """
    Fetch a settings page. Returns the page payload, or None when
    nothing can be rendered yet.
    """
    with st.spinner("Loading..."):
        result = api.get_settings_page(domain)

    if result["status"] == 401:
        st.warning("Your session has expired. Please log in again.")
        st.session_state["is_authenticated"] = False
        st.session_state.token = None
        return None
    if result["status"] == 403:
        st.info("You don't have access to settings. Ask an administrator for a settings permission.")
        return None
    if result["status"] != 200:
        st.error(error_message(result, "Unable to load settings"))
        return None

    page = result["data"]
    if page.get("error"):
        st.error(f"Could not load {domain}: {page['error']['cause']}")
    if page.get("decode_errors"):
        st.warning(f"{len(page['decode_errors'])} {domain} record(s) could not be read and were skipped.")
    return page


def _report(result: dict, success: str, default: str):
    if result["status"] in [200, 201, 204]:
        st.success(success)
        st.rerun()
    else:
        st.error(error_message(result, default))


# ==================== Managers ====================


def phases_manager(page: dict):
    phases = page["items"]
    projects = page["related"].get("projects", [])
    project_names = {p["id"]: p["name"] for p in projects}

    st.subheader("Phases")
    if not projects:
        st.info("Create a project first to add phases.")
    else:
        with st.form("create_phase_form"):
            project_id = st.selectbox(
                "Project",
                options=[p["id"] for p in projects],
                format_func=lambda pid: project_names.get(pid, pid),
            )
            col1, col2 = st.columns(2)
            with col1:
                name = st.text_input("Name")
            with col2:
                pep_element = st.text_input("PEP element")
            if st.form_submit_button("Add phase"):
                if not name.strip() or not pep_element.strip():
                    st.warning("Name and PEP element are required")
                else:
                    _report(api.create_phase(project_id, name, pep_element), "Phase created", "Could not create phase")

    if not phases:
        st.caption("No phases yet.")
    for phase in phases:
        col1, col2, col3, col4 = st.columns([3, 2, 3, 1])
        col1.write(f"**{phase['name']}**")
        col2.write(phase["pep_element"])
        col3.write(project_names.get(phase.get("project_id"), "-"))
        if col4.button("Delete", key=f"del_phase_{phase['id']}"):
            _report(api.delete_phase(phase["id"]), "Phase deleted", "Could not delete phase")


def positions_manager(page: dict):
    positions = page["items"]

    st.subheader("Employee positions")
    with st.form("create_position_form"):
        col1, col2 = st.columns(2)
        with col1:
            name = st.text_input("Name")
        with col2:
            code = st.text_input("Code")
        if st.form_submit_button("Add position"):
            if not name.strip() or not code.strip():
                st.warning("Name and code are required")
            else:
                _report(api.create_position(name, code), "Position created", "Could not create position")

    if not positions:
        st.caption("No positions yet.")
    for position in positions:
        col1, col2 = st.columns([5, 1])
        col1.write(format_code_label(position["name"], position["code"]))
        if col2.button("Delete", key=f"del_position_{position['id']}"):
            _report(api.delete_position(position["id"]), "Position deleted", "Could not delete position")


def _project_form(key: str, project=None) -> dict:
    project = project or {}
    identifier = st.text_input("Identifier", value=project.get("identifier", ""), key=f"{key}_identifier")
    name = st.text_input("Name", value=project.get("name", ""), key=f"{key}_name")
    col1, col2 = st.columns(2)
    with col1:
        control = st.checkbox(
            "Requires control approval",
            value=project.get("requires_control_approval", False),
            key=f"{key}_control",
        )
    with col2:
        site_manager = st.checkbox(
            "Requires site manager approval",
            value=project.get("requires_site_manager_approval", False),
            key=f"{key}_site_manager",
        )
    return {
        "identifier": identifier,
        "name": name,
        "requires_control_approval": control,
        "requires_site_manager_approval": site_manager,
    }


def projects_manager(page: dict):
    projects = page["items"]

    st.subheader("Projects")
    with st.form("create_project_form"):
        values = _project_form("new_project")
        if st.form_submit_button("Add project"):
            if not values["identifier"].strip() or not values["name"].strip():
                st.warning("Identifier and name are required")
            else:
                _report(api.create_project(values), "Project created", "Could not create project")

    if not projects:
        st.caption("No projects yet.")
    for project in projects:
        with st.expander(f"{project['identifier']} - {project['name']}"):
            with st.form(f"edit_project_{project['id']}"):
                values = _project_form(f"project_{project['id']}", project)
                if st.form_submit_button("Save"):
                    _report(api.update_project(project["id"], values), "Project updated", "Could not update project")
            if st.button("Delete project", key=f"del_project_{project['id']}"):
                _report(api.delete_project(project["id"]), "Project deleted", "Could not delete project")


def _permission_editor(key: str, groups: list, selected: list) -> list:
    """Checkbox tree; toggles go through the backend so parents and children cascade."""
    state_key = f"{key}_permissions"
    if state_key not in st.session_state:
        st.session_state[state_key] = list(selected)
    current = st.session_state[state_key]

    def toggle(perm_key: str, checked: bool):
        result = api.toggle_permission(current, perm_key, checked)
        if result["status"] == 200:
            st.session_state[state_key] = result["data"]
        else:
            st.error(error_message(result, "Could not update permissions"))

    def checkbox(definition: dict, indent: int):
        cols = st.columns([indent + 1, 12]) if indent else [st]
        target = cols[-1]
        was_checked = definition["key"] in current
        checked = target.checkbox(definition["label"], value=was_checked, key=f"{key}_{definition['key']}")
        if checked != was_checked:
            toggle(definition["key"], checked)
            st.rerun()
        for sub in definition.get("sub_permissions", []):
            checkbox(sub, indent + 1)

    for group in groups:
        st.markdown(f"**{group['category']}**")
        for definition in group["permissions"]:
            checkbox(definition, 0)
    return st.session_state[state_key]


def roles_manager(page: dict):
    roles = page["items"]

    st.subheader("Roles")
    groups_result = api.get_permission_groups()
    groups = groups_result["data"] if groups_result["status"] == 200 else []

    with st.expander("New role"):
        name = st.text_input("Role name", key="new_role_name")
        permissions = _permission_editor("new_role", groups, [])
        if st.button("Create role"):
            if not name.strip():
                st.warning("Role name is required")
            else:
                st.session_state.pop("new_role_permissions", None)
                _report(api.create_role(name, permissions), "Role created", "Could not create role")

    if not roles:
        st.caption("No roles yet.")
    for role in roles:
        with st.expander(f"{role['name']} ({len(role.get('permissions', []))} permissions)"):
            name = st.text_input("Role name", value=role["name"], key=f"role_name_{role['id']}")
            permissions = _permission_editor(f"role_{role['id']}", groups, role.get("permissions", []))
            col1, col2 = st.columns(2)
            if col1.button("Save", key=f"save_role_{role['id']}"):
                st.session_state.pop(f"role_{role['id']}_permissions", None)
                _report(api.update_role(role["id"], name, permissions), "Role updated", "Could not update role")
            if col2.button("Delete", key=f"del_role_{role['id']}"):
                _report(api.delete_role(role["id"]), "Role deleted", "Could not delete role")


MANAGERS = {
    "phases": phases_manager,
    "positions": positions_manager,
    "projects": projects_manager,
    "roles": roles_manager,
}


def render():
    st.title("Settings")

    tabs = st.tabs(list(DOMAINS))
    for tab, domain in zip(tabs, DOMAINS.values()):
        with tab:
            page = load_page(domain)
            if page is None:
                continue
            MANAGERS[domain](page)
