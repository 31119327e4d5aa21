import datetime as dt
import unittest

from barbershop.models import Booking, Holiday
from tests.base import ApiTestCase

DAY = dt.date(2024, 6, 15)


class SlotsTestCase(ApiTestCase):
    def add_booking(self, at, status="Pending", day=DAY):
        booking = Booking(
            shop_id=1,
            customer_name="Guest",
            customer_phone="9876543210",
            service_name="Haircut",
            booking_date=day,
            booking_time=at,
            price=500,
            status=status,
            type="Online",
        )
        self.db.add(booking)
        self.db.commit()
        return booking

    def add_holiday(self, status, note, day=DAY):
        self.db.add(Holiday(date=day, status=status, note=note))
        self.db.commit()

    def slots(self, day="2024-06-15"):
        return self.client.get("/api/slots", params={"date": day})

    def test_open_day_lists_taken_times_in_order(self) -> None:
        self.add_booking(dt.time(14, 0), status="Confirmed")
        self.add_booking(dt.time(10, 30))
        self.add_booking(dt.time(11, 0), status="Completed")
        self.add_booking(dt.time(9, 0), day=dt.date(2024, 6, 16))

        response = self.slots()

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "Open", "data": ["10:30", "11:00", "14:00"]})

    def test_declined_bookings_free_their_slot(self) -> None:
        self.add_booking(dt.time(10, 0), status="Declined")
        self.add_booking(dt.time(12, 0), status="No-Show")

        self.assertEqual(self.slots().json(), {"status": "Open", "data": ["12:00"]})

    def test_holiday_overrides_bookings(self) -> None:
        self.add_booking(dt.time(10, 0), status="Confirmed")
        self.add_holiday("Closed", "Diwali")

        self.assertEqual(self.slots().json(), {"status": "Closed", "note": "Diwali", "data": []})

    def test_limited_holiday_is_reported_as_is(self) -> None:
        self.add_holiday("Limited", "Closing at 2pm")

        self.assertEqual(
            self.slots().json(), {"status": "Limited", "note": "Closing at 2pm", "data": []}
        )

    def test_first_holiday_record_wins(self) -> None:
        self.add_holiday("Limited", "first")
        self.add_holiday("Closed", "second")

        self.assertEqual(self.slots().json()["note"], "first")

    def test_empty_day(self) -> None:
        self.assertEqual(self.slots().json(), {"status": "Open", "data": []})

    def test_date_is_required(self) -> None:
        response = self.client.get("/api/slots")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Date required"})

    def test_malformed_date(self) -> None:
        response = self.slots("tomorrow")

        self.assertEqual(response.status_code, 400)
        self.assertIn("YYYY-MM-DD", response.json()["error"])

    def test_new_booking_shows_up_as_taken(self) -> None:
        self.book(time="17:00")

        self.assertEqual(self.slots().json()["data"], ["17:00"])

    def test_taken_slot_is_listed_as_entered(self) -> None:
        self.book(time="10:30 AM")
        self.walk_in(time="4:00 pm")

        self.assertEqual(self.slots().json()["data"], ["10:30 AM"])
        today = self.db.query(Booking).filter(Booking.type == "Walk-in").one().booking_date
        self.assertEqual(self.slots(today.isoformat()).json()["data"], ["4:00 pm"])


if __name__ == "__main__":
    unittest.main()
