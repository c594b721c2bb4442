"""Booking aggregate service: carrier booking requests and confirmed shipments."""
