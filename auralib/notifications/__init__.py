"""Notification event data and tray-icon menu models."""