"""Layout and PDF generation engine."""
