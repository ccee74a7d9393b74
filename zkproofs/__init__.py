"""Prime fields, polynomials, Fiat-Shamir transcripts, sumcheck, GKR and Shamir sharing."""

__version__ = "0.1.0"