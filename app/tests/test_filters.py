from app.services.filters import ViewState, filter_records

RECORDS = [
	{"id": "l1", "project_id": "P1", "bank_id": "B1"},
	{"id": "l2", "project_id": "P2", "bank_id": "B1"},
	{"id": "l3", "project_id": "P1", "bank_id": "B2"},
	{"id": "l4", "project_id": "P3", "bank_id": "B2"},
]


def ids(records):
	return [record["id"] for record in records]


def test_empty_selection_returns_everything_in_order():
	assert filter_records(RECORDS, ViewState()) == RECORDS


def test_project_only_ignores_bank():
	state = ViewState(selected_projects=frozenset({"P1"}))
	assert ids(filter_records(RECORDS, state)) == ["l1", "l3"]


def test_bank_only_ignores_project():
	state = ViewState(selected_banks=frozenset({"B2"}))
	assert ids(filter_records(RECORDS, state)) == ["l3", "l4"]


def test_both_dimensions_are_conjunctive():
	state = ViewState(selected_projects=frozenset({"P1", "P2"}), selected_banks=frozenset({"B1"}))
	assert ids(filter_records(RECORDS, state)) == ["l1", "l2"]


def test_selection_matching_nothing_returns_nothing():
	state = ViewState(selected_projects=frozenset({"P1"}), selected_banks=frozenset({"B9"}))
	assert filter_records(RECORDS, state) == []


def test_toggle_returns_new_state():
	state = ViewState()
	checked = state.toggle_project("P1", True)
	assert checked.selected_projects == {"P1"}
	assert state.selected_projects == frozenset()
	
	unchecked = checked.toggle_project("P1", False)
	assert unchecked.selected_projects == frozenset()
	# Unchecking the last item brings back "show all"
	assert filter_records(RECORDS, unchecked) == RECORDS


def test_toggle_is_idempotent_union_and_difference():
	state = ViewState().toggle_bank("B1", True).toggle_bank("B1", True)
	assert state.selected_banks == {"B1"}
	assert state.toggle_bank("B7", False).selected_banks == {"B1"}


def test_projects_and_banks_are_independent():
	state = ViewState().toggle_project("P1", True).toggle_bank("B2", True)
	assert state.selected_projects == {"P1"}
	assert state.selected_banks == {"B2"}


def test_view_state_round_trips_through_json():
	state = ViewState(selected_projects=frozenset({"P1"}), currency="USD")
	restored = ViewState.model_validate_json(state.model_dump_json())
	assert restored == state


def test_with_currency_upper_cases():
	assert ViewState().with_currency("eur").currency == "EUR"
	assert ViewState(currency="USD").with_currency(None).currency is None


def test_works_with_objects(session, seeded, make_letter):
	letter = make_letter(seeded["b1"], seeded["p2"])
	state = ViewState(selected_projects=frozenset({seeded["p2"].id}))
	assert filter_records([letter], state) == [letter]
