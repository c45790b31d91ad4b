"""English strings for the registration site and admin dashboard."""

EN_STRINGS = {
    # === BRAND ===
    "site_title": "TechLink Events",
    "site_tagline": (
        "The ultimate platform for coding competitions, hackathons, and tech workshops. "
        "Register your team and join the innovation revolution."
    ),

    # === NAVIGATION ===
    "nav_register": "Register",
    "nav_admin": "Admin Dashboard",
    "nav_login": "Admin Login",
    "nav_logout": "Logout",

    # === REGISTRATION ===
    "registration_header": "Event Registration",
    "registration_subheader": "Register for coding competitions, hackathons, and workshops",
    "registration_form_hint": "Fill out the form below to register your team for an upcoming event",
    "registration_submit": "Submit Registration",
    "registration_unavailable_button": "Registration Not Available",
    "registration_add_member": "Add Member",
    "registration_member_placeholder": "Member {index} name",
    "registration_leader_suffix": " (Team Leader)",
    "registration_not_available_title": "Registration Not Available",
    "registration_not_available": "This event is not open for registration.",
    "registration_missing_title": "Missing Required Fields",
    "registration_missing": "Please fill in all required fields marked with *",
    "registration_too_many_members": "A group can have at most {max} members.",
    "registration_invalid": "Please check the registration details and try again.",
    "registration_error_title": "Error submitting registration",
    "registration_success_title": "Registration Submitted!",
    "registration_success": (
        "Successfully registered for {event_name}. "
        "You'll receive a confirmation email shortly."
    ),
    "registration_no_events": "No events are scheduled yet.",

    # === LOGIN ===
    "login_header": "Admin Login",
    "login_subheader": "Access the admin dashboard to manage events and applications",
    "login_failed_title": "Login Failed",
    "login_missing": "Email and password are required",
    "login_no_user": "No user returned from the auth service",
    "login_denied_title": "Access Denied",
    "login_denied": "You are not authorized as an admin.",
    "login_success_title": "Login Successful",
    "login_success": "Welcome to the admin dashboard!",
    "logout_success": "Logged out",

    # === ADMIN ===
    "admin_header": "Admin Dashboard",
    "admin_subheader": "Manage events and applications",
    "admin_total_applications": "Total Applications",
    "admin_open_events": "Open Events",
    "admin_upcoming_events": "Upcoming Events",
    "admin_avg_group_size": "Avg Group Size",
    "admin_events_tab": "Events",
    "admin_applications_tab": "Applications",
    "admin_all_events": "All Events",
    "admin_filtered_count": "{count} application(s) for this event",
    "admin_no_applications": "No applications yet.",
    "admin_delete_confirm": "Are you sure you want to delete this event?",
    "events_fetch_failed": "Error fetching events",
    "applications_fetch_failed": "Error fetching applications",
    "backend_bad_record": "Unreadable {kind} record {record_id}",
    "application_not_found": "Application not found",
    "application_status_failed": "Error updating status",
    "application_status_done": "Application {status}",
    "application_status_refused": "Only pending applications can be reviewed (current status: {status}).",
    "application_status_invalid": "Unknown status: {status}",
    "application_members_hint": "Team members listed in submission order.",
    "application_team_leader": "Team Leader",

    # === EVENT EDITOR ===
    "event_new_header": "Create Event",
    "event_edit_header": "Edit Event",
    "event_required": "All fields are required",
    "event_bad_date": "Dates must use the YYYY-MM-DD format",
    "event_not_found": "Event not found",
    "event_create_failed": "Error creating event",
    "event_update_failed": "Error updating event",
    "event_delete_failed": "Error deleting event",
    "event_created": "Event created successfully",
    "event_updated": "Event updated successfully",
    "event_deleted": "Event deleted successfully",
}
