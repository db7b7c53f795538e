"""Resource Formatting - storage rows (snake_case) to API shapes (camelCase).

Invariants:
    - Every public field name is listed explicitly; storage columns never leak by accident
    - password_hash is never part of any user shape
    - Pure: rows in, dicts out; JSON encoding of UUID/datetime happens at the HTTP edge
"""


# ─── Join Applications ───────────────────────────────────────────

def application_summary(row: dict) -> dict:
    """List-view shape for a join application."""
    return {
        "id": row["id"],
        "name": f"{row['first_name']} {row['last_name']}",
        "email": row["email"],
        "phone": row["phone"],
        "academicYear": row["academic_year"],
        "fieldOfStudy": row["field_of_study"],
        "preferredDepartment": row["preferred_department"],
        "secondaryDepartment": row["secondary_department"],
        "status": row["status"],
        "submittedAt": row["created_at"],
        "reviewedAt": row["reviewed_at"],
    }


def application_detail(row: dict) -> dict:
    return {
        "id": row["id"],
        "firstName": row["first_name"],
        "lastName": row["last_name"],
        "email": row["email"],
        "phone": row["phone"],
        "telegramId": row["telegram_id"],
        "discordId": row["discord_id"],
        "homeAddress": row["home_address"],
        "academicYear": row["academic_year"],
        "fieldOfStudy": row["field_of_study"],
        "preferredDepartment": row["preferred_department"],
        "secondaryDepartment": row["secondary_department"],
        "skills": row["skills"],
        "motivation": row["motivation"],
        "status": row["status"],
        "submittedAt": row["created_at"],
        "reviewedAt": row["reviewed_at"],
        "reviewedBy": row["reviewed_by"],
    }


# ─── Events ──────────────────────────────────────────────────────

def event(row: dict, current_attendees: int | None = None) -> dict:
    """Full event shape. current_attendees overrides the stored counter when given."""
    return {
        "id": row["id"],
        "title": row["title"],
        "description": row["description"],
        "eventDate": row["event_date"],
        "eventTime": row["event_time"],
        "location": row["location"],
        "maxAttendees": row["max_attendees"],
        "currentAttendees": (
            row["current_attendees"] if current_attendees is None else current_attendees
        ),
        "category": row["category"],
        "difficulty": row["difficulty"],
        "imageUrl": row["image_url"],
        "status": row["status"],
        "isActive": row["is_active"],
        "activationDate": row["activation_date"],
        "department": row["department"],
        "createdAt": row["created_at"],
        "updatedAt": row["updated_at"],
    }


def registration(row: dict) -> dict:
    return {
        "id": row["id"],
        "userId": row["user_id"],
        "status": row["status"],
        "registeredAt": row["created_at"],
    }


# ─── Tasks ───────────────────────────────────────────────────────

def task(row: dict) -> dict:
    return {
        "id": row["id"],
        "title": row["title"],
        "description": row["description"],
        "status": row["status"],
        "priority": row["priority"],
        "progress": row["progress"],
        "dueDate": row["due_date"],
        "category": row["category"],
        "assignedBy": row["assigned_by"],
        "assignedTo": row["assigned_to"],
        "assignedDate": row["assigned_date"],
        "department": row["department"],
        "completedAt": row["completed_at"],
        "createdAt": row["created_at"],
        "updatedAt": row["updated_at"],
    }


# ─── Announcements ───────────────────────────────────────────────

def announcement(row: dict) -> dict:
    return {
        "id": row["id"],
        "title": row["title"],
        "content": row["content"],
        "isImportant": row["is_important"],
        "category": row["category"],
        "targetAudience": row["target_audience"],
        "targetDepartment": row["target_department"],
        "authorId": row["author_id"],
        "createdAt": row["created_at"],
        "updatedAt": row["updated_at"],
    }


# ─── Users ───────────────────────────────────────────────────────

def user_summary(row: dict) -> dict:
    return {
        "id": row["id"],
        "email": row["email"],
        "firstName": row["first_name"],
        "lastName": row["last_name"],
        "phone": row["phone"],
        "studentId": row["student_id"],
        "academicYear": row["academic_year"],
        "fieldOfStudy": row["field_of_study"],
        "role": row["role"],
        "department": row["department"],
        "isActive": row["is_active"],
        "createdAt": row["created_at"],
        "lastLogin": row["last_login"],
    }


def user_detail(row: dict) -> dict:
    return {
        **user_summary(row),
        "telegramId": row["telegram_id"],
        "discordId": row["discord_id"],
        "homeAddress": row["home_address"],
        "updatedAt": row["updated_at"],
    }
