"""Gettext helpers with message context support."""