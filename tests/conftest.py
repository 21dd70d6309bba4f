"""Shared test fixtures."""

from __future__ import annotations

import pytest


# Clean icon-set SVGs (already minimal apart from ids)

CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
</svg>'''

SMILEY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
  <circle cx="8" cy="9" r="1"/>
  <circle cx="16" cy="9" r="1"/>
  <path d="M8 14s1.5 2 4 2 4-2 4-2"/>
</svg>'''

BAR_CHART_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <line x1="18" x2="18" y1="20" y2="10"/>
  <line x1="12" x2="12" y1="20" y2="4"/>
  <line x1="6" x2="6" y1="20" y2="14"/>
</svg>'''


# Editor export with authoring metadata, comments and dead weight

DIRTY_SVG = '''<?xml version="1.0" encoding="UTF-8"?>
<!-- Created with Inkscape -->
<svg xmlns="http://www.w3.org/2000/svg" xmlns:inkscape="http://www.inkscape.org/namespaces/inkscape" xmlns:sodipodi="http://sodipodi.sourceforge.net/DTD/sodipodi-0.0.dtd" xmlns:xlink="http://www.w3.org/1999/xlink" width="100px" height="100px" inkscape:version="1.3">
  <sodipodi:namedview id="base" pagecolor="#ffffff"/>
  <metadata><rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"><rdf:Description/></rdf:RDF></metadata>
  <defs>
    <linearGradient id="fade" x1="0" x2="1"/>
    <radialGradient id="stale" cx="5" cy="5" r="5"/>
  </defs>
  <!-- layer 1 -->
  <g inkscape:label="Layer 1" inkscape:groupmode="layer" data-name="layer">
    <path d="M 10.000,20.500   L 30.250 , 40.00" style=" " fill="url(#fade)"/>
    <g>
      <g></g>
    </g>
    <rect data-name="box" x="5" y="5" width="10" height="10"/>
  </g>
</svg>'''

DEFS_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" viewBox="0 0 100 100">
  <defs>
    <linearGradient id="used" x1="0" x2="1"/>
    <linearGradient id="unused" x1="0" x2="1"/>
    <circle id="dot" r="5"/>
    <rect id="orphan" width="3" height="3"/>
  </defs>
  <rect x="10" y="10" width="50" height="50" fill="url(#used)"/>
  <use xlink:href="#dot" x="20" y="20"/>
</svg>'''

CHAINED_DEFS_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" viewBox="0 0 10 10">
  <defs>
    <linearGradient id="base" x1="0" x2="1"/>
    <linearGradient id="derived" x1="0" x2="1" xlink:href="#base"/>
  </defs>
  <rect width="10" height="10" fill="red"/>
</svg>'''

# Definitions whose children carry no geometry: gradient stops, filter
# primitives, a marker drawn from an empty styled group

DEFINITIONS_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 20 20">
  <defs>
    <linearGradient id="sky">
      <stop offset="0" stop-color="red"/>
      <stop offset="1" stop-color="blue"/>
    </linearGradient>
    <filter id="blur"><feGaussianBlur stdDeviation="2"/></filter>
    <marker id="arrow" markerWidth="4" markerHeight="4" orient="auto"><g fill="black"/></marker>
    <linearGradient id="spare"><stop offset="0" stop-color="green"/></linearGradient>
  </defs>
  <rect width="10" height="10" fill="url(#sky)" filter="url(#blur)"/>
  <path d="M0 0 L10 10" marker-end="url(#arrow)"/>
</svg>'''

NESTED_EMPTY_GROUPS_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10">
  <g>
    <g>
      <g></g>
    </g>
  </g>
  <rect width="4" height="4"/>
</svg>'''

FOREIGN_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" xmlns:sodipodi="http://sodipodi.sourceforge.net/DTD/sodipodi-0.0.dtd" viewBox="0 0 10 10">
  <sodipodi:namedview id="nv"/>
  <foreignObject x="0" y="0" width="10" height="10"><div xmlns="http://www.w3.org/1999/xhtml">hi</div></foreignObject>
  <blink>pasted</blink>
  <rect width="1" height="1"/>
</svg>'''


ALL_SAMPLES = [
    CIRCLE_SVG,
    SMILEY_SVG,
    BAR_CHART_SVG,
    DIRTY_SVG,
    DEFS_SVG,
    CHAINED_DEFS_SVG,
    DEFINITIONS_SVG,
    NESTED_EMPTY_GROUPS_SVG,
    FOREIGN_SVG,
]


@pytest.fixture
def circle_svg() -> str:
    return CIRCLE_SVG


@pytest.fixture
def dirty_svg() -> str:
    return DIRTY_SVG


@pytest.fixture
def defs_svg() -> str:
    return DEFS_SVG
