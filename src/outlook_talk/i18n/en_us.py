"""
English language strings for the Outlook add-in.

Must have the same keys as the Swedish pack (sv_se.py).
"""

STRINGS: dict[str, str] = {
    # ── General ─────────────────────────────────────────────────────────
    "app.title": "Nextcloud Talk for Outlook",
    "app.loading": "Loading...",
    "app.error": "An error occurred",
    # ── Authentication ──────────────────────────────────────────────────
    "auth.login": "Log in",
    "auth.logout": "Log out",
    "auth.loginRequired": "You must log in to use this feature",
    "auth.loginButton": "Log in with Nextcloud",
    "auth.loggingIn": "Logging in...",
    "auth.loginSuccess": "Login successful!",
    "auth.loginError": "Login failed. Please try again.",
    "auth.tokenRefreshError": "Could not refresh login. Please log in again.",
    # ── Meetings ────────────────────────────────────────────────────────
    "meeting.create": "Create Talk Meeting",
    "meeting.creating": "Creating meeting...",
    "meeting.created": "Talk meeting created!",
    "meeting.error": "Could not create meeting",
    "meeting.title": "Meeting title",
    "meeting.start": "Start time",
    "meeting.end": "End time",
    "meeting.participants": "Participants",
    "meeting.settings": "Meeting settings",
    "meeting.talkLink": "Talk link",
    "meeting.joinInstructions": "Join the meeting via Nextcloud Talk:",
    # ── Participant settings ────────────────────────────────────────────
    "participant.settings": "Participant Settings",
    "participant.email": "Email",
    "participant.authLevel": "Authentication Level",
    "participant.authLevel.none": "None",
    "participant.authLevel.sms": "SMS",
    "participant.authLevel.loa3": "LOA-3 (BankID)",
    "participant.personalNumber": "Personal Number",
    "participant.smsNumber": "SMS Number",
    "participant.secureEmail": "Send as secure email",
    "participant.notification": "Notification",
    "participant.notification.email": "Email",
    "participant.notification.emailSms": "Email + SMS",
    # ── Buttons ─────────────────────────────────────────────────────────
    "button.save": "Save",
    "button.cancel": "Cancel",
    "button.close": "Close",
    "button.ok": "OK",
    "button.back": "Back",
    "button.next": "Next",
    # ── Messages ────────────────────────────────────────────────────────
    "message.success": "Action successful",
    "message.error": "An error occurred",
    "message.confirm": "Are you sure?",
    "message.teamsLinkRemoved": "Teams link has been removed",
    "message.syncedToNextcloud": "Synced with Nextcloud Calendar",
    # ── Validation ──────────────────────────────────────────────────────
    "validation.required": "This field is required",
    "validation.email": "Invalid email address",
    "validation.personalNumber": "Invalid personal number (format: YYYYMMDD-XXXX)",
    "validation.phoneNumber": "Invalid phone number (format: +46XXXXXXXXX)",
}
