""" Taper model for converting stem diameters between measurement heights. """

__all__ = ["taper_exponent", "taper_corrected_diameter"]


def taper_exponent(diameter_cm: float) -> float:
    r"""
    Computes the diameter-dependent exponent :math:`a = -0.156 + 0.048 \cdot D` of the taper model.

    Args:
        diameter_cm: Stem diameter :math:`D` at the point of measurement in centimeters.

    Returns:
        Taper exponent.
    """

    return -0.156 + 0.048 * diameter_cm


def taper_corrected_diameter(diameter_cm: float, measurement_height: float, target_height: float = 1.3) -> float:
    r"""
    Converts a stem diameter measured at a non-standard height to an estimate at the target height using the
    allometric taper model :math:`D' = D \cdot (h_{target} / h_{POM})^a` with :math:`a = -0.156 + 0.048 \cdot D`.

    Args:
        diameter_cm: Stem diameter :math:`D` at the point of measurement in centimeters.
        measurement_height: Height of the point of measurement :math:`h_{POM}` in meters.
        target_height: Height :math:`h_{target}` for which the diameter is to be estimated in meters. Defaults to 1.3.

    Returns:
        Estimated stem diameter at the target height in centimeters.

    Raises:
        ValueError: If :code:`measurement_height` is not positive.
    """

    if measurement_height <= 0:
        raise ValueError("measurement_height must be positive.")

    return diameter_cm * (target_height / measurement_height) ** taper_exponent(diameter_cm)
