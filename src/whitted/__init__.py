"""Whitted-style ray tracer.

This package renders 3D scenes by casting one ray per pixel and shading the
nearest hit with the Phong model, including hard shadows from point lights:
- Homogeneous points/vectors and 4x4 transforms with cached inverses
- Spheres and planes behind a common shape contract
- Stripe, gradient, ring and checker patterns
- PNG and PPM export

Subpackages:
    core: Tuples, matrices, colors and rays
    geometry: Shape primitives and intersection records
    materials: Phong materials and procedural patterns
    scene: Lights, hit selection, shading and the world aggregate
    camera: Pinhole camera with ray generation and rendering
    preview: Canvas image sink, display and export utilities
"""

__version__ = "0.1.0"
