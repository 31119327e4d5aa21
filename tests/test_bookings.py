import datetime as dt
import unittest

from barbershop import config
from barbershop.domain.stats.service import StatsService
from barbershop.models import Booking, Holiday, Service
from barbershop.shared.clock import shop_today
from tests.base import CUSTOMER, OWNER_PHONE, ApiTestCase


class OnlineBookingTestCase(ApiTestCase):
    def test_booking_starts_pending_and_notifies_owner(self) -> None:
        response = self.book()

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["message"], "Booking sent!")

        booking = self.db.get(Booking, response.json()["id"])
        self.assertEqual(booking.status, "Pending")
        self.assertEqual(booking.type, "Online")
        self.assertEqual(booking.booking_date, dt.date(2024, 6, 15))
        self.assertEqual(booking.booking_time, dt.time(10, 0))
        self.assertEqual(booking.date_time, "2024-06-15 at 10:00")
        self.assertEqual(booking.price, 500)
        self.assertEqual(booking.duration, 30)

        self.assertEqual(len(self.notifier.sent), 1)
        message = self.notifier.sent[0]
        self.assertEqual(message["to"], OWNER_PHONE)
        self.assertEqual(message["type"], "owner_new_booking")
        for fragment in ("Ravi", "Haircut", "₹500", "2024-06-15 at 10:00"):
            self.assertIn(fragment, message["body"])

    def test_twelve_hour_time_is_kept_as_entered(self) -> None:
        response = self.book(time=" 2:30 PM ")

        self.assertEqual(response.status_code, 200)
        booking = self.db.get(Booking, response.json()["id"])
        self.assertEqual(booking.booking_time, dt.time(14, 30))
        self.assertEqual(booking.date_time, "2024-06-15 at 2:30 PM")
        self.assertIn("2024-06-15 at 2:30 PM", self.notifier.sent[0]["body"])

    def test_numeric_phone_is_accepted(self) -> None:
        response = self.book(phone=9999999999)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.db.get(Booking, response.json()["id"]).customer_phone, "9999999999")

    def test_closed_day_is_rejected_without_insert(self) -> None:
        self.db.add(Holiday(date=dt.date(2024, 12, 25), status="Closed", note="Christmas"))
        self.db.commit()

        response = self.book(date="2024-12-25")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Shop is closed on 2024-12-25."})
        self.assertEqual(self.db.query(Booking).count(), 0)
        self.assertEqual(self.notifier.sent, [])

    def test_limited_day_still_accepts_bookings(self) -> None:
        self.db.add(Holiday(date=dt.date(2024, 6, 15), status="Limited", note="Half day"))
        self.db.commit()

        self.assertEqual(self.book().status_code, 200)

    def test_invalid_fields_are_rejected(self) -> None:
        cases = [
            ("name", "", "Name is required"),
            ("name", None, "Name is required"),
            ("phone", "12345", "Invalid phone number. Please enter a valid mobile number."),
            ("date", "15/06/2024", "Invalid date '15/06/2024'. Please use YYYY-MM-DD."),
            ("time", "noon", "Invalid time 'noon'. Please use HH:MM."),
            ("service", "Perm", "Unknown service 'Perm'"),
        ]
        for field, value, error in cases:
            with self.subTest(field=field, value=value):
                response = self.book(**{field: value})

                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.json(), {"error": error})

        self.assertEqual(self.db.query(Booking).count(), 0)
        self.assertEqual(self.notifier.sent, [])

    def test_no_owner_message_without_owner_number(self) -> None:
        self.patch_config("OWNER_PHONE_NUMBER", None)

        self.assertEqual(self.book().status_code, 200)
        self.assertEqual(self.notifier.sent, [])


class WalkInTestCase(ApiTestCase):
    def test_walk_in_is_confirmed_for_today_and_silent(self) -> None:
        response = self.walk_in(service="Beard Trim", time="16:00")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["message"], "Walk-in added")

        booking = self.db.get(Booking, response.json()["id"])
        self.assertEqual(booking.status, "Confirmed")
        self.assertEqual(booking.type, "Walk-in")
        self.assertEqual(booking.booking_date, shop_today())
        self.assertEqual(booking.customer_phone, config.WALKIN_PHONE_PLACEHOLDER)
        self.assertEqual(booking.price, 200)
        self.assertEqual(self.notifier.sent, [])

    def test_walk_in_status_changes_are_silent(self) -> None:
        booking_id = self.walk_in().json()["id"]

        response = self.set_status(booking_id, "Completed")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.notifier.sent, [])

    def test_walk_in_requires_admin(self) -> None:
        response = self.client.post(
            "/api/admin/walkin", json={"name": "Guest", "service": "Haircut", "time": "11:00"}
        )

        self.assertEqual(response.status_code, 401)
        self.assertEqual(self.db.query(Booking).count(), 0)


class StatusUpdateTestCase(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.booking_id = self.book().json()["id"]
        self.notifier.sent.clear()

    def test_confirm_sends_confirmation_with_price(self) -> None:
        response = self.set_status(self.booking_id, "Confirmed")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"message": "Status Updated"})
        self.assertEqual(len(self.notifier.sent), 1)
        message = self.notifier.sent[0]
        self.assertEqual(message["to"], CUSTOMER["phone"])
        self.assertEqual(message["type"], "status_confirmed")
        for fragment in ("Booking Confirmed", "₹500", "2024-06-15 at 10:00", config.SHOP_ADDRESS):
            self.assertIn(fragment, message["body"])

    def test_each_status_has_its_message(self) -> None:
        markers = {
            "Declined": "cannot accept your booking",
            "Completed": "Thanks for visiting",
            "No-Show": "we missed you",
        }
        for status, marker in markers.items():
            with self.subTest(status=status):
                self.notifier.sent.clear()

                self.set_status(self.booking_id, status)

                self.assertEqual(len(self.notifier.sent), 1)
                self.assertIn(marker, self.notifier.sent[0]["body"])

    def test_back_to_pending_is_silent(self) -> None:
        self.set_status(self.booking_id, "Confirmed")
        self.notifier.sent.clear()

        response = self.set_status(self.booking_id, "Pending")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.notifier.sent, [])

    def test_repeating_a_status_is_accepted(self) -> None:
        self.assertEqual(self.set_status(self.booking_id, "Confirmed").status_code, 200)
        self.assertEqual(self.set_status(self.booking_id, "Confirmed").status_code, 200)

        self.assertEqual(self.db.get(Booking, self.booking_id).status, "Confirmed")

    def test_repeated_status_resends_identical_message(self) -> None:
        self.set_status(self.booking_id, "Completed")
        first = self.db.get(Booking, self.booking_id)
        snapshot = (first.status, first.price, first.date_time)

        self.set_status(self.booking_id, "Completed")
        second = self.db.get(Booking, self.booking_id)

        self.assertEqual((second.status, second.price, second.date_time), snapshot)
        self.assertEqual(len(self.notifier.sent), 2)
        self.assertEqual(self.notifier.sent[0], self.notifier.sent[1])
        self.assertEqual(self.notifier.sent[0]["to"], CUSTOMER["phone"])

    def test_terminal_status_can_be_corrected_by_default(self) -> None:
        self.set_status(self.booking_id, "Declined")

        response = self.set_status(self.booking_id, "Confirmed")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.db.get(Booking, self.booking_id).status, "Confirmed")

    def test_strict_mode_rejects_disallowed_transitions(self) -> None:
        self.patch_config("ENFORCE_STATUS_TRANSITIONS", True)

        response = self.set_status(self.booking_id, "Completed")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Cannot change booking from Pending to Completed"})
        self.assertEqual(self.db.get(Booking, self.booking_id).status, "Pending")
        self.assertEqual(self.notifier.sent, [])

        self.assertEqual(self.set_status(self.booking_id, "Confirmed").status_code, 200)
        self.assertEqual(self.set_status(self.booking_id, "Completed").status_code, 200)

    def test_unknown_status_is_rejected(self) -> None:
        response = self.set_status(self.booking_id, "Cancelled")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Invalid status 'Cancelled'"})

    def test_missing_booking_is_not_found(self) -> None:
        response = self.set_status(999, "Confirmed")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"error": "Booking not found"})

    def test_completion_locks_in_current_service_price(self) -> None:
        haircut = self.db.query(Service).filter(Service.name == "Haircut").one()
        haircut.price = 550
        self.db.commit()

        self.set_status(self.booking_id, "Completed")

        self.assertEqual(self.db.get(Booking, self.booking_id).price, 550)

    def test_status_change_requires_admin(self) -> None:
        response = self.set_status(self.booking_id, "Confirmed", headers={})

        self.assertEqual(response.status_code, 401)
        self.assertEqual(self.db.get(Booking, self.booking_id).status, "Pending")


class RescheduleTestCase(ApiTestCase):
    def reschedule(self, booking_id, **payload):
        return self.client.put(
            f"/api/admin/bookings/{booking_id}/update", json=payload, headers=self.admin_headers
        )

    def test_reschedule_overwrites_details_and_notifies(self) -> None:
        booking_id = self.book().json()["id"]
        self.set_status(booking_id, "Confirmed")
        self.notifier.sent.clear()

        response = self.reschedule(
            booking_id, name="Ravi K", service="Hair Spa", date="2024-06-16", time="12:30"
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"message": "Booking updated successfully"})

        booking = self.db.get(Booking, booking_id)
        self.assertEqual(booking.customer_name, "Ravi K")
        self.assertEqual(booking.service_name, "Hair Spa")
        self.assertEqual(booking.date_time, "2024-06-16 at 12:30")
        self.assertEqual(booking.price, 700)
        self.assertEqual(booking.duration, 60)
        self.assertEqual(booking.status, "Confirmed")

        self.assertEqual(len(self.notifier.sent), 1)
        self.assertEqual(self.notifier.sent[0]["type"], "booking_rescheduled")
        self.assertIn("2024-06-16 at 12:30", self.notifier.sent[0]["body"])

    def set_service_price(self, name, price) -> None:
        service = self.db.query(Service).filter(Service.name == name).one()
        service.price = price
        self.db.commit()

    def test_completed_booking_keeps_its_price(self) -> None:
        booking_id = self.book().json()["id"]
        self.set_status(booking_id, "Confirmed")
        self.set_status(booking_id, "Completed")
        self.set_service_price("Haircut", 900)

        response = self.reschedule(
            booking_id, name="Ravi Kumar", service="Haircut", date="2024-06-15", time="10:00"
        )

        self.assertEqual(response.status_code, 200)
        booking = self.db.get(Booking, booking_id)
        self.db.refresh(booking)
        self.assertEqual(booking.customer_name, "Ravi Kumar")
        self.assertEqual(booking.price, 500)
        self.assertEqual(StatsService(self.db).get_stats(today=dt.date(2024, 6, 15)).revenue, 500)

    def test_same_service_keeps_its_price(self) -> None:
        booking_id = self.book().json()["id"]
        self.set_service_price("Haircut", 900)

        self.reschedule(booking_id, name="Ravi", service="Haircut", date="2024-06-16", time="11:00 AM")

        booking = self.db.get(Booking, booking_id)
        self.db.refresh(booking)
        self.assertEqual(booking.price, 500)
        self.assertEqual(booking.date_time, "2024-06-16 at 11:00 AM")

    def test_reschedule_missing_booking(self) -> None:
        response = self.reschedule(42, name="Ravi", service="Haircut", date="2024-06-16", time="12:30")

        self.assertEqual(response.status_code, 404)

    def test_reschedule_requires_all_fields(self) -> None:
        booking_id = self.book().json()["id"]

        response = self.reschedule(booking_id, name="Ravi", service="Haircut", time="12:30")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Date is required"})


class BookingListTestCase(ApiTestCase):
    def list_bookings(self, **params):
        response = self.client.get("/api/admin/bookings", params=params, headers=self.admin_headers)
        self.assertEqual(response.status_code, 200)
        return response.json()["data"]

    def test_list_is_newest_first_and_filterable(self) -> None:
        first = self.book().json()["id"]
        second = self.book(date="2024-06-16", time="11:00").json()["id"]
        self.set_status(first, "Confirmed")

        self.assertEqual([b["id"] for b in self.list_bookings()], [second, first])
        self.assertEqual([b["id"] for b in self.list_bookings(status="Confirmed")], [first])

        on_day = self.list_bookings(date="2024-06-16")
        self.assertEqual([b["id"] for b in on_day], [second])
        self.assertEqual(on_day[0]["date_time"], "2024-06-16 at 11:00")
        self.assertEqual(on_day[0]["time"], "11:00")

    def test_single_booking(self) -> None:
        booking_id = self.book().json()["id"]

        response = self.client.get(f"/api/admin/bookings/{booking_id}", headers=self.admin_headers)

        self.assertEqual(response.status_code, 200)
        data = response.json()["data"]
        self.assertEqual(data["customer_name"], "Ravi")
        self.assertEqual(data["status"], "Pending")
        self.assertEqual(data["date"], "2024-06-15")

    def test_listing_requires_admin(self) -> None:
        self.assertEqual(self.client.get("/api/admin/bookings").status_code, 401)


if __name__ == "__main__":
    unittest.main()
