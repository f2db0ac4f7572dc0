"""Centralized GraphQL query strings.

Every template is sent with a ``token`` variable injected by the query client;
the variable shapes documented below are what callers add on top of it.
Each template selects exactly one root field, which is the single entry the
response decoder unwraps from ``data``.
"""

from __future__ import annotations


# Shared selections

ADDRESS_FIELDS = """
address1
address2
address3
city
state
postalCode
country
"""

COORDINATES_FIELDS = """
longitude
latitude
"""

IMPACT_STATS_FIELDS = """
soapRecycled
linensRecycled
bottlesRecycled
paperRecycled
peopleServed
womenEmployed
"""

USER_FIELDS = """
id
firstName
lastName
title
company
email
phone
skype
"""

PROPERTY_FIELDS = f"""
id
name
propertyType
rooms
services
collectionType
logo
phone
billingAddress {{ {ADDRESS_FIELDS} }}
shippingAddress {{ {ADDRESS_FIELDS} }}
coordinates {{ {COORDINATES_FIELDS} }}
shippingNote
notes
"""

PICKUP_FIELDS = """
id
confirmationCode
collectionType
status
readyDate
pickupDate
property { id name }
cartons { id product percentFull }
notes
"""


# Queries

IMPACT_STATS_BY_PROPERTY_ID = f"""
query ImpactStatsByPropertyIdInput($input: ImpactStatsByPropertyIdInput) {{
  impactStatsByPropertyId(input: $input) {{
    impactStats {{ {IMPACT_STATS_FIELDS} }}
  }}
}}
"""
# variables: {"input": {"propertyId": "4"}}

USER_BY_ID = f"""
query UserByIdInput($input: UserByIdInput) {{
  userById(input: $input) {{
    user {{ {USER_FIELDS} }}
  }}
}}
"""
# variables: {"input": {"userId": "4"}}

HUB_BY_PROPERTY_ID = f"""
query HubByPropertyIdInput($input: HubByPropertyIdInput) {{
  hubByPropertyId(input: $input) {{
    hub {{
      id
      name
      address {{ {ADDRESS_FIELDS} }}
      email
      phone
      coordinates {{ {COORDINATES_FIELDS} }}
      properties {{ {PROPERTY_FIELDS} }}
      workflow
      impact {{ {IMPACT_STATS_FIELDS} }}
    }}
  }}
}}
"""
# variables: {"input": {"propertyId": "4"}}

PROPERTIES_BY_USER_ID = f"""
query PropertiesByUserIdInput($input: PropertiesByUserIdInput) {{
  propertiesByUserId(input: $input) {{
    properties {{ {PROPERTY_FIELDS} }}
  }}
}}
"""
# variables: {"input": {"userId": "4"}}

PICKUPS_BY_PROPERTY_ID = f"""
query PickupsByPropertyIdInput($input: PickupsByPropertyIdInput) {{
  pickupsByPropertyId(input: $input) {{ {PICKUP_FIELDS} }}
}}
"""
# variables: {"input": {"propertyId": "5"}}; payload is a list of pickups


# Mutations

LOG_IN = f"""
mutation LogIn($token: String!) {{
  logIn(input: {{ token: $token }}) {{
    user {{ {USER_FIELDS} }}
  }}
}}
"""
# variables: none beyond the injected token


def property_input(property_id: str) -> dict:
    """Variables for templates keyed by property id."""
    return {"input": {"propertyId": str(property_id)}}


def user_input(user_id: str) -> dict:
    """Variables for templates keyed by user id."""
    return {"input": {"userId": str(user_id)}}
