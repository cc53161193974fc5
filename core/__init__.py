"""Rdzeń aplikacji forum: modele, repozytoria, serwisy, sesja."""
