"""Smoke tests to verify package imports work."""

def test_package_imports():
    """Test that all main classes can be imported."""
    from trochia import OrbitalElements, CartesianState, Vector3, Body
    assert OrbitalElements is not None
    assert CartesianState is not None
    assert Vector3 is not None
    assert Body is not None

def test_version_exists():
    """Test that version is defined."""
    import trochia
    assert hasattr(trochia, '__version__')
    assert trochia.__version__ == "0.1.0"

def test_star_import_names():
    """Test that everything in __all__ resolves."""
    import trochia
    for name in trochia.__all__:
        assert hasattr(trochia, name), name

def test_can_create_orbital_elements():
    """Test basic OrbitalElements creation."""
    from trochia import OrbitalElements
    oe = OrbitalElements([5.2, 0.05, 0.02, 0, 0, 0])
    assert oe.sma == 5.2

def test_can_create_body():
    """Test basic Body creation."""
    from trochia import Body
    body = Body(mass=1e-3, name='Jupiter')
    assert body.mass == 1e-3
    assert body.hco.position.norm == 0.0
