"""Extraction stages.

- metadata: wof:id / wof:name / wof:placetype with an explicit sentinel policy
- bounds: bbox to index rectangle
- spatialize: metadata + bounds into a SpatialSummary
- decompose: Polygon / MultiPolygon geometry into flat (lat, lon) rings
"""
