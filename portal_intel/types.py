"""Common type aliases.

GUIDs are opaque strings handed out by the map backend; the package only ever
compares them for equality. Coordinates travel as integer micro-degrees
(``E6``) so that equality is exact.
"""

PortalGUID = str
LinkGUID = str
FieldGUID = str

E6 = int
"""Latitude or longitude scaled by 1,000,000."""
