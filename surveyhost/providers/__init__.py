"""Backing-service adapters implementing the interfaces in surveyhost.interfaces."""
