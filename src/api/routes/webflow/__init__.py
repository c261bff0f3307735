"""Rotas do canal Webflow."""
