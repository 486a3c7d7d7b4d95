"""Adaptadores de infraestructura: cliente/repositorios MongoDB, Stripe, identidad."""
