"""
outlook-talk — localization core of the Nextcloud Talk Outlook add-in.
"""

__version__ = "1.0.0"
