"""
Swedish language strings (canonical) for the Outlook add-in.

sv-SE is the default locale. The English pack (en_us.py) must define
the same keys.
"""

STRINGS: dict[str, str] = {
    # ── General ─────────────────────────────────────────────────────────
    "app.title": "Nextcloud Talk för Outlook",
    "app.loading": "Laddar...",
    "app.error": "Ett fel uppstod",
    # ── Authentication ──────────────────────────────────────────────────
    "auth.login": "Logga in",
    "auth.logout": "Logga ut",
    "auth.loginRequired": "Du måste logga in för att använda denna funktion",
    "auth.loginButton": "Logga in med Nextcloud",
    "auth.loggingIn": "Loggar in...",
    "auth.loginSuccess": "Inloggning lyckades!",
    "auth.loginError": "Inloggning misslyckades. Försök igen.",
    "auth.tokenRefreshError": "Kunde inte förnya inloggning. Logga in igen.",
    # ── Meetings ────────────────────────────────────────────────────────
    "meeting.create": "Skapa Talk-möte",
    "meeting.creating": "Skapar möte...",
    "meeting.created": "Talk-möte skapat!",
    "meeting.error": "Kunde inte skapa möte",
    "meeting.title": "Mötestitel",
    "meeting.start": "Starttid",
    "meeting.end": "Sluttid",
    "meeting.participants": "Deltagare",
    "meeting.settings": "Mötesinställningar",
    "meeting.talkLink": "Talk-länk",
    "meeting.joinInstructions": "Anslut till mötet via Nextcloud Talk:",
    # ── Participant settings ────────────────────────────────────────────
    "participant.settings": "Deltagarinställningar",
    "participant.email": "E-post",
    "participant.authLevel": "Autentiseringsnivå",
    "participant.authLevel.none": "Ingen",
    "participant.authLevel.sms": "SMS",
    "participant.authLevel.loa3": "LOA-3 (BankID)",
    "participant.personalNumber": "Personnummer",
    "participant.smsNumber": "SMS-nummer",
    "participant.secureEmail": "Skicka som säker e-post",
    "participant.notification": "Notifiering",
    "participant.notification.email": "E-post",
    "participant.notification.emailSms": "E-post + SMS",
    # ── Buttons ─────────────────────────────────────────────────────────
    "button.save": "Spara",
    "button.cancel": "Avbryt",
    "button.close": "Stäng",
    "button.ok": "OK",
    "button.back": "Tillbaka",
    "button.next": "Nästa",
    # ── Messages ────────────────────────────────────────────────────────
    "message.success": "Åtgärden lyckades",
    "message.error": "Ett fel uppstod",
    "message.confirm": "Är du säker?",
    "message.teamsLinkRemoved": "Teams-länk har tagits bort",
    "message.syncedToNextcloud": "Synkroniserat med Nextcloud Kalender",
    # ── Validation ──────────────────────────────────────────────────────
    "validation.required": "Detta fält är obligatoriskt",
    "validation.email": "Ogiltig e-postadress",
    "validation.personalNumber": "Ogiltigt personnummer (format: ÅÅÅÅMMDD-XXXX)",
    "validation.phoneNumber": "Ogiltigt telefonnummer (format: +46XXXXXXXXX)",
}
