"""
Raw node builders and sample documents for tests.
"""

BLANK_ID = "00000000-0000-0000-0000-000000000000"
USER_ID = "3c2a9c2e-1f4e-4d5b-9a4c-6f1f1e1f1e1f"

API_ROOT_XML = f"""<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<api>
  <link href="/ovirt-engine/api/vms" rel="vms"/>
  <link href="/ovirt-engine/api/vms?search={{query}}" rel="vms/search"/>
  <link href="/ovirt-engine/api/templates" rel="templates"/>
  <link href="/ovirt-engine/api/templates?search={{query}}" rel="templates/search"/>
  <link href="/ovirt-engine/api/events;from={{event_id}}?search={{query}}" rel="events/search"/>
  <special_objects>
    <link href="/ovirt-engine/api/templates/{BLANK_ID}" rel="templates/blank"/>
    <link href="/ovirt-engine/api/tags/{BLANK_ID}" rel="tags/root"/>
  </special_objects>
  <product_info>
    <name>oVirt Engine</name>
    <vendor>ovirt.org</vendor>
    <version major="4" minor="5" build="0" revision="0"/>
  </product_info>
  <summary>
    <vms>
      <total>5</total>
      <active>2</active>
    </vms>
  </summary>
  <time>2026-10-18T10:00:00.000+02:00</time>
  <authenticated_user href="/ovirt-engine/api/users/{USER_ID}" id="{USER_ID}"/>
</api>
"""


def attr(**attributes):
    """Build a raw node holding only an attribute map."""
    return {"@attributes": attributes}
