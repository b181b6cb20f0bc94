"""Full leader/participant walk-through over the HTTP surface."""


def test_create_join_track_and_end(client, create_hike, join_hike):
    hike = create_hike()
    join_code, leader_code = hike["joinCode"], hike["leaderCode"]
    assert join_code != leader_code

    joined = join_hike(join_code, uuid="hiker-a", name="Hiker A")
    assert joined.status_code == 200
    assert leader_code not in joined.text

    participants = client.get(f"/hike/{join_code}/participant", params={"leaderCode": leader_code})
    assert participants.status_code == 200
    assert [(p["user"]["uuid"], p["status"]) for p in participants.json()] == [("hiker-a", "active")]
    assert leader_code not in participants.text

    updated = client.put(f"/hike/{join_code}/participant/hiker-a", json={"status": "completed"})
    assert updated.status_code == 200

    participants = client.get(f"/hike/{join_code}/participant", params={"leaderCode": leader_code})
    assert [(p["user"]["uuid"], p["status"]) for p in participants.json()] == [("hiker-a", "completed")]

    ended = client.put(f"/hike/{leader_code}", json={"joinCode": join_code, "leaderCode": leader_code})
    assert ended.status_code == 200

    gone = client.get(f"/hike/{join_code}")
    assert gone.status_code == 404
    assert leader_code not in gone.text

    # A completed participant is not downgraded to finished by the close.
    participants = client.get(f"/hike/{join_code}/participant", params={"leaderCode": leader_code})
    assert [p["status"] for p in participants.json()] == ["completed"]
