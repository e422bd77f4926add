"""Numeric constants and angle conversions used throughout the math helpers."""

from __future__ import annotations

ZERO = 0.0
ONE_SIXTH = 0.16666666666666666666666666666667
ONE_TENTH = 0.1
ONE_FIFTH = 0.2
ONE_FOURTH = 0.25
ONE_THIRD = 0.33333333333333333333333333333333
ONE_HALF = 0.5
TWO_THIRDS = 0.66666666666666666666666666666667
ONE = 1.0
ONE_AND_ONE_HALF = 1.5
TWO = 2.0
TWO_AND_ONE_HALF = 2.5

E = 2.7182818284590452353602874713527
PI = 3.1415926535897932384626433832795
GOLDEN_RATIO = 1.61803398874989484820458683436563811

TWO_PI = 6.283185307179586476925286766559
THREE_PI = 9.4247779607693797153879301498385
HALF_PI = 1.5707963267948966192313216916398
THIRD_PI = 1.0471975511965977461542144610932
TWO_THIRDS_PI = 2.0943951023931954923084289221863
THREE_HALF_PI = 4.7123889803846898576939650749193
QUARTER_PI = 0.78539816339744830961566084581988
FIFTH_PI = 0.6283185307179586476925286766559
SIXTH_PI = 0.52359877559829887307710723054658
ONE_OVER_PI = 0.31830988618379067153776752674503
ONE_OVER_TWO_PI = 0.15915494309189533576888376337251
ONE_OVER_THREE_PI = 0.10610329539459689051258917558168
TWO_OVER_PI = 0.63661977236758134307553505349006
TWO_OVER_THREE_PI = 0.21220659078919378102517835116335
THREE_OVER_PI = 0.95492965855137201461330258023509
THREE_OVER_TWO_PI = 0.47746482927568600730665129011754

DEGREE_IN_RADIANS = 0.01745329251994329576923690768489
RADIAN_IN_DEGREES = 57.295779513082320876798154814105

SIN_SIXTH_PI = 0.5
SIN_QUARTER_PI = 0.70710678118654752440084436210485
SIN_THIRD_PI = 0.86602540378443864676372317075294
SIN_ONE_HALF = 0.47942553860420300027328793521557
SIN_ONE = 0.8414709848078965066525023216303
COS_SIXTH_PI = 0.86602540378443864676372317075294
COS_QUARTER_PI = 0.70710678118654752440084436210485
COS_THIRD_PI = 0.5
COS_ONE_HALF = 0.87758256189037271611628158260383
COS_ONE = 0.54030230586813971740093660744298

SQRT_TWO = 1.4142135623730950488016887242097
ONE_OVER_SQRT_TWO = 0.70710678118654752440084436210485
SQRT_THREE = 1.7320508075688772935274463415059
ONE_OVER_SQRT_THREE = 0.57735026918962576450914878050196
SQRT_FIVE = 2.2360679774997896964091736687313
ONE_OVER_SQRT_FIVE = 0.44721359549995793928183473374626

LOG_TWO_E = 1.4426950408889634073599246810019
LOG_TEN_E = 0.43429448190325182765112891891661
LOG_E_TWO = 0.69314718055994530941723212145818
LOG_E_TEN = 2.3025850929940456840179914546844

# Single-precision machine epsilon: the tolerance used by the engine's
# near-zero and near-one checks.
EPSILON = 1.1920928955078125e-07


def radians(degrees):
    """Convert an angle (or array of angles) from degrees to radians."""
    return degrees * DEGREE_IN_RADIANS


def degrees(radians):
    """Convert an angle (or array of angles) from radians to degrees."""
    return radians * RADIAN_IN_DEGREES