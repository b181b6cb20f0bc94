# Liability waiver text, rendered per hike from its leader, organization and photo release flag

from string import Template
from typing import Optional

WAIVER_TEMPLATE = Template(
    """RELEASE AND WAIVER OF LIABILITY

I am voluntarily taking part in a group hike led by $leader_name$organization_clause.

I understand that hiking involves inherent risks, including uneven and slippery
terrain, falling rocks, flash floods, heat, dehydration, insects, and getting
lost or injured far from medical help. I accept these risks and am responsible
for my own safety, equipment, water, and physical fitness for this hike.

I release $released_parties from any claim for injury, illness, loss, or damage
arising from my participation, except in cases of gross negligence.

I confirm that the contact and emergency information I provided is accurate.
$photo_release_section"""
)

PHOTO_RELEASE_SECTION = Template(
    """
Photographic Release

I grant $released_parties permission to photograph or record me during this
hike and to use those images without compensation.
"""
)


def render_waiver(leader_name: str, organization: Optional[str], photo_release: bool) -> str:
    """Waiver text for one hike. The photographic release appears only when the hike asks for it."""
    released_parties = leader_name or "the hike leader"
    organization_clause = ""
    if organization:
        organization_clause = f" for {organization}"
        released_parties = f"{released_parties} and {organization}"

    photo_release_section = ""
    if photo_release:
        photo_release_section = PHOTO_RELEASE_SECTION.substitute(released_parties=released_parties)

    return WAIVER_TEMPLATE.substitute(
        leader_name=leader_name,
        organization_clause=organization_clause,
        released_parties=released_parties,
        photo_release_section=photo_release_section,
    )
