import pytest

from modules.contacts.exceptions import ContactNotFoundError
from modules.contacts.interfaces import IContactService
from shared.exceptions import NotFoundError, ValidationError
from shared.validation import ContactInput

BOB = {"name": "Bob", "email": "bob@example.com", "phone": "5551234567"}
ROBERT = {"name": "Robert", "email": "robert@example.com", "phone": "5559876543"}


class TestContactService:
    def test_satisfies_interface(self, contact_service):
        assert isinstance(contact_service, IContactService)

    @pytest.mark.asyncio
    async def test_create_and_list(self, contact_service):
        created = await contact_service.create_contact("user-a", BOB)

        contacts = await contact_service.list_contacts("user-a")

        assert created.owner_id == "user-a"
        assert [c.id for c in contacts] == [created.id]

    @pytest.mark.asyncio
    async def test_list_is_owner_scoped(self, contact_service):
        await contact_service.create_contact("user-a", BOB)

        assert await contact_service.list_contacts("user-b") == []

    @pytest.mark.asyncio
    async def test_list_preserves_insertion_order(self, contact_service):
        first = await contact_service.create_contact("user-a", BOB)
        second = await contact_service.create_contact("user-a", ROBERT)

        contacts = await contact_service.list_contacts("user-a")

        assert [c.id for c in contacts] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_create_invalid(self, contact_service, contacts_repo):
        """Invalid input should never reach the store."""
        with pytest.raises(ValidationError):
            await contact_service.create_contact("user-a", {**BOB, "phone": "123"})
        assert contacts_repo.contacts == {}

    @pytest.mark.asyncio
    async def test_create_ignores_payload_owner(self, contact_service):
        created = await contact_service.create_contact("user-a", {**BOB, "owner_id": "user-b"})
        assert created.owner_id == "user-a"

    @pytest.mark.asyncio
    async def test_update_replaces_fields(self, contact_service):
        created = await contact_service.create_contact("user-a", BOB)

        updated = await contact_service.update_contact(created.id, "user-a", ROBERT)

        assert updated.id == created.id
        assert updated.owner_id == "user-a"
        assert (updated.name, updated.email, updated.phone) == (
            "Robert", "robert@example.com", "5559876543"
        )

    @pytest.mark.asyncio
    async def test_update_other_owner_is_not_found(self, contact_service, contacts_repo):
        """Another user's contact should be indistinguishable from a missing one."""
        created = await contact_service.create_contact("user-a", BOB)

        with pytest.raises(ContactNotFoundError) as exc_info:
            await contact_service.update_contact(created.id, "user-b", ROBERT)

        assert exc_info.value.message == "Contact not found"
        assert contacts_repo.contacts[created.id].name == "Bob"

    @pytest.mark.asyncio
    async def test_update_invalid_input_checked_first(self, contact_service):
        with pytest.raises(ValidationError):
            await contact_service.update_contact("not-a-uuid", "user-a", {"name": ""})

    @pytest.mark.asyncio
    async def test_update_malformed_id(self, contact_service):
        with pytest.raises(NotFoundError):
            await contact_service.update_contact("not-a-uuid", "user-a", ContactInput(**BOB))

    @pytest.mark.asyncio
    async def test_delete(self, contact_service):
        created = await contact_service.create_contact("user-a", BOB)

        await contact_service.delete_contact(created.id, "user-a")

        assert await contact_service.list_contacts("user-a") == []

    @pytest.mark.asyncio
    async def test_delete_twice(self, contact_service):
        """The second delete should find nothing."""
        created = await contact_service.create_contact("user-a", BOB)
        await contact_service.delete_contact(created.id, "user-a")

        with pytest.raises(ContactNotFoundError):
            await contact_service.delete_contact(created.id, "user-a")

    @pytest.mark.asyncio
    async def test_delete_other_owner(self, contact_service, contacts_repo):
        created = await contact_service.create_contact("user-a", BOB)

        with pytest.raises(ContactNotFoundError):
            await contact_service.delete_contact(created.id, "user-b")
        assert created.id in contacts_repo.contacts

    @pytest.mark.asyncio
    async def test_delete_malformed_id(self, contact_service):
        with pytest.raises(ContactNotFoundError):
            await contact_service.delete_contact("42", "user-a")
