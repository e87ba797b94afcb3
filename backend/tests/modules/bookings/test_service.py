import pytest
from unittest.mock import MagicMock

from modules.bookings.models import Booking, CreateBookingRequest, UpdateBookingRequest
from modules.bookings.repository import BookingRepository
from modules.bookings.service import BookingService
from modules.bookings.exceptions import BookingNotFoundError
from modules.properties.repository import PropertyRepository
from modules.users.repository import UserRepository
from shared.exceptions import ReferenceNotFoundError, ValidationError


def make_booking(**overrides) -> Booking:
    data = {
        "id": "b-1",
        "startDate": "2024-07-01T15:00:00Z",
        "endDate": "2024-07-05T10:00:00Z",
        "userId": "7",
        "propertyId": "p-1",
    }
    data.update(overrides)
    return Booking.model_validate(data)


@pytest.fixture
def repo():
    return MagicMock(spec=BookingRepository)


@pytest.fixture
def users():
    users = MagicMock(spec=UserRepository)
    users.exists.return_value = True
    return users


@pytest.fixture
def properties():
    properties = MagicMock(spec=PropertyRepository)
    properties.exists.return_value = True
    return properties


@pytest.fixture
def service(repo, users, properties):
    return BookingService(repo, users=users, properties=properties)


@pytest.fixture
def create_request():
    return CreateBookingRequest.model_validate({
        "startDate": "2024-07-01T15:00:00Z",
        "endDate": "2024-07-05T10:00:00Z",
        "userId": "7",
        "propertyId": "p-1",
    })


class TestListBookings:
    @pytest.mark.asyncio
    async def test_filters_by_user(self, service, repo):
        repo.list_bookings.return_value = [make_booking()]

        bookings = await service.list_bookings(user_id="7")

        assert len(bookings) == 1
        repo.list_bookings.assert_called_once_with(user_id="7")


class TestCreateBooking:
    @pytest.mark.asyncio
    async def test_creates_when_references_exist(self, service, repo, users, properties, create_request):
        repo.create.return_value = make_booking()

        booking = await service.create_booking(create_request)

        assert booking.id == "b-1"
        users.exists.assert_called_once_with("7")
        properties.exists.assert_called_once_with("p-1")
        stored = repo.create.call_args.args[0]
        assert stored["userId"] == "7"
        assert stored["propertyId"] == "p-1"

    @pytest.mark.asyncio
    async def test_missing_user(self, service, repo, users, create_request):
        users.exists.return_value = False

        with pytest.raises(ReferenceNotFoundError, match="User not found"):
            await service.create_booking(create_request)

        repo.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_property(self, service, repo, properties, create_request):
        properties.exists.return_value = False

        with pytest.raises(ReferenceNotFoundError, match="Property not found"):
            await service.create_booking(create_request)

        repo.create.assert_not_called()


class TestUpdateBooking:
    @pytest.mark.asyncio
    async def test_no_fields(self, service, repo):
        with pytest.raises(ValidationError):
            await service.update_booking("b-1", UpdateBookingRequest())
        repo.exists.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_booking(self, service, repo):
        repo.exists.return_value = False
        with pytest.raises(BookingNotFoundError, match="Booking not found"):
            await service.update_booking("b-1", UpdateBookingRequest(user_id="8"))

    @pytest.mark.asyncio
    async def test_changed_user_is_checked(self, service, repo, users):
        repo.exists.return_value = True
        users.exists.return_value = False

        with pytest.raises(ReferenceNotFoundError, match="User not found"):
            await service.update_booking("b-1", UpdateBookingRequest(user_id="8"))

        repo.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_updates_dates(self, service, repo, users, properties):
        repo.exists.return_value = True
        repo.update.return_value = make_booking(endDate="2024-07-06T10:00:00Z")

        await service.update_booking(
            "b-1", UpdateBookingRequest.model_validate({"endDate": "2024-07-06T10:00:00Z"})
        )

        changes = repo.update.call_args.args[1]
        assert list(changes) == ["endDate"]
        users.exists.assert_not_called()
        properties.exists.assert_not_called()


class TestDeleteBooking:
    @pytest.mark.asyncio
    async def test_delete_twice(self, service, repo):
        repo.delete.side_effect = [make_booking(), None]

        deleted = await service.delete_booking("b-1")
        assert deleted.id == "b-1"

        with pytest.raises(BookingNotFoundError):
            await service.delete_booking("b-1")
