"""Conector Webflow: webhooks de formulários."""
