"""Curses terminal interface for browsing and editing tasks and projects."""