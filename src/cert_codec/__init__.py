"""
cert_codec — certificate extension codec for a certificate-manager front-end.

Converts the per-toggle boolean form of the KeyUsage, ExtendedKeyUsage and
BasicConstraints extensions to and from the compact wire specs of the
certificate-issuing service, and classifies CA names, key types and
certificate validity for display.

Fallible operations return a railway-style Result instead of raising.
"""

__version__ = "0.1.0"
