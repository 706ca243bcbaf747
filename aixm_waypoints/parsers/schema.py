"""
Element and attribute names of the AIXM 5.1 message structure.

Names keep their namespace prefix, matching the keys produced by
xmltodict when namespaces are not processed.
"""

ENVELOPE = 'message:AIXMBasicMessage'
HAS_MEMBER = 'message:hasMember'

DESIGNATED_POINT = 'aixm:DesignatedPoint'
TIME_SLICE = 'aixm:timeSlice'
DESIGNATED_POINT_TIME_SLICE = 'aixm:DesignatedPointTimeSlice'
DESIGNATOR = 'aixm:designator'
LOCATION = 'aixm:location'
POINT = 'aixm:Point'
POS = 'gml:pos'

# Position path inside a DesignatedPointTimeSlice
POSITION_PATH = (LOCATION, POINT, POS)

GML_ID = '@gml:id'
ATTRIBUTE_PREFIX = '@'
TEXT_KEY = '#text'
