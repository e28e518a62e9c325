"""Incremental ANSI/VT escape sequence parsing into terminal actions."""