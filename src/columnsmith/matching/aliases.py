"""Built-in alias data for canonical import fields.

Each canonical field maps to the free-text column titles schools and
businesses commonly use for it. Order matters: aliases are scored in the
order listed.
"""

DEFAULT_FIELD_ALIASES: dict[str, list[str]] = {
    # Student fields
    "admissionNumber": [
        "admission number", "admission no", "adm no", "adm number", "adm_no", "admission_number",
        "admission", "student id", "student_id", "studentid", "reg no", "reg number",
        "registration number", "registration no", "registration_number", "learner id",
        "learner_id", "id number", "id no", "student no", "student number", "pupil id",
        "pupil no", "pupil number", "index", "index no", "index number", "roll no",
        "roll number", "s/n", "serial no", "serial number",
    ],
    "studentName": [
        "student name", "student_name", "studentname", "name", "full name", "fullname",
        "full_name", "learner name", "learner_name", "pupil name", "pupil_name", "child name",
        "child_name", "student", "learner", "pupil", "child", "names", "student names",
        "pupil names",
    ],
    "firstName": [
        "first name", "firstname", "first_name", "given name", "given_name", "forename", "name 1",
    ],
    "lastName": [
        "last name", "lastname", "last_name", "surname", "family name", "family_name", "name 2",
    ],
    "middleName": [
        "middle name", "middlename", "middle_name", "other names", "other_names", "othernames",
    ],
    "dateOfBirth": [
        "date of birth", "dob", "birth date", "birthdate", "date_of_birth", "birth_date",
        "d.o.b", "d.o.b.", "born", "born on", "birthday", "birth day",
    ],
    "gender": ["gender", "sex", "m/f", "male/female", "boy/girl"],
    "class": [
        "class", "form", "grade", "level", "year", "class name", "class_name", "classname",
        "current class", "current_class", "stream", "section", "group",
    ],
    "stream": ["stream", "section", "arm", "class stream", "class arm", "division"],

    # Parent/guardian fields
    "parentName": [
        "parent name", "parent_name", "parentname", "guardian name", "guardian_name",
        "guardianname", "parent/guardian", "parent", "guardian", "father name", "mother name",
        "father/mother", "parent's name", "guardian's name", "next of kin", "next_of_kin",
        "nok name", "caretaker",
    ],
    "parentPhone": [
        "parent phone", "parent_phone", "parentphone", "guardian phone", "guardian_phone",
        "guardianphone", "parent tel", "parent telephone", "guardian tel", "phone", "tel",
        "telephone", "contact", "contact number", "contact phone", "mobile", "mobile no",
        "mobile number", "cell", "cell phone", "parent mobile", "guardian mobile",
        "parent contact", "guardian contact", "phone number", "phone no", "tel no",
        "telephone number", "nok phone", "nok contact", "emergency contact",
    ],
    "parentEmail": [
        "parent email", "parent_email", "parentemail", "guardian email", "guardian_email",
        "guardianemail", "email", "e-mail", "email address", "parent's email",
        "guardian's email", "contact email",
    ],
    "relationship": [
        "relationship", "relation", "parent type", "guardian type", "parent/guardian type",
        "relation type", "relationship to child", "relationship to student",
    ],
    "occupation": [
        "occupation", "job", "profession", "work", "employment", "parent occupation",
        "guardian occupation",
    ],
    "address": [
        "address", "home address", "residential address", "residence", "location", "home",
        "village", "area", "district", "region", "physical address", "postal address",
    ],
    "studentAdmissionNumber": [
        "student admission number", "student admission no", "child admission", "child adm no",
        "linked student", "student id", "student_id", "child id", "pupil id",
    ],

    # Staff fields
    "staffId": [
        "staff id", "staff_id", "staffid", "employee id", "employee_id", "employeeid",
        "emp id", "emp_id", "empid", "teacher id", "teacher_id", "teacherid",
        "staff no", "staff number", "employee no", "employee number", "id", "id no",
    ],
    "staffName": [
        "staff name", "staff_name", "staffname", "employee name", "employee_name",
        "employeename", "teacher name", "teacher_name", "teachername", "name", "full name",
        "fullname",
    ],
    "position": [
        "position", "role", "job title", "job_title", "jobtitle", "designation", "title",
        "post", "staff position", "staff role", "employee role", "job role",
    ],
    "department": [
        "department", "dept", "section", "unit", "staff department", "employee department",
    ],
    "dateJoined": [
        "date joined", "date_joined", "datejoined", "join date", "joining date", "start date",
        "hire date", "hired date", "employment date", "started", "joined",
    ],
    "salary": [
        "salary", "pay", "wage", "wages", "monthly salary", "gross salary", "net salary",
        "remuneration", "compensation", "earnings",
    ],
    "email": [
        "email", "e-mail", "email address", "email_address", "emailaddress", "mail",
        "staff email", "employee email", "work email", "official email",
    ],
    "phone": [
        "phone", "tel", "telephone", "mobile", "cell", "contact", "phone number", "phone no",
        "tel no", "telephone number", "mobile no", "mobile number", "cell phone",
        "contact number",
    ],

    # Fee fields
    "feeType": [
        "fee type", "fee_type", "feetype", "type of fee", "fee category", "fee name",
        "description", "fee description", "item", "fee item", "charge", "charge type",
    ],
    "amount": [
        "amount", "fee amount", "fee_amount", "feeamount", "total", "total amount", "sum",
        "value", "charge", "cost", "price", "ugx", "shs", "shillings", "fee", "fees",
    ],
    "dueDate": [
        "due date", "due_date", "duedate", "deadline", "payment deadline", "pay by",
        "payment due", "expected date", "target date",
    ],
    "term": [
        "term", "academic term", "school term", "semester", "quarter", "period",
        "term name", "term number", "term no",
    ],

    # Attendance fields
    "date": ["date", "attendance date", "day", "record date", "date recorded", "for date"],
    "status": [
        "status", "attendance status", "attendance", "present/absent", "present", "absent",
        "attended", "attendance record", "attendance type", "p/a", "p or a",
    ],
    "notes": [
        "notes", "remarks", "comment", "comments", "observation", "observations", "reason",
        "note",
    ],

    # Inventory fields
    "itemCode": [
        "item code", "item_code", "itemcode", "product code", "product_code", "productcode",
        "sku", "code", "barcode", "bar code", "item id", "product id", "stock code",
    ],
    "itemName": [
        "item name", "item_name", "itemname", "product name", "product_name", "productname",
        "name", "item", "product", "description", "item description", "stock name",
    ],
    "category": [
        "category", "item category", "product category", "type", "item type", "product type",
        "classification", "group", "item group",
    ],
    "quantity": [
        "quantity", "qty", "stock", "stock quantity", "stock level", "available", "in stock",
        "current stock", "balance", "stock balance", "units", "count", "no of items", "number",
    ],
    "unitPrice": [
        "unit price", "unit_price", "unitprice", "price", "cost", "rate", "selling price",
        "sale price", "buy price", "purchase price", "unit cost", "price per unit",
    ],
    "supplier": [
        "supplier", "vendor", "seller", "manufacturer", "source", "supplier name", "vendor name",
    ],
    "reorderLevel": [
        "reorder level", "reorder_level", "reorderlevel", "min stock", "minimum stock",
        "min quantity", "minimum quantity", "reorder point", "alert level", "low stock level",
    ],
    "location": [
        "location", "store", "warehouse", "storage", "shelf", "bin", "storage location",
        "store location", "stock location", "position",
    ],

    # Class fields
    "className": ["class name", "class_name", "classname", "name", "class", "form", "grade", "level"],
    "form": ["form", "form number", "form no", "year", "year group", "level"],
    "classTeacher": [
        "class teacher", "class_teacher", "classteacher", "teacher", "form teacher",
        "form master", "form mistress", "head teacher", "class head",
    ],
    "capacity": [
        "capacity", "max students", "maximum students", "max size", "class size",
        "size", "seats", "total seats", "limit",
    ],
    "year": ["year", "academic year", "school year", "calendar year"],

    # Subject fields
    "subjectCode": [
        "subject code", "subject_code", "subjectcode", "code", "subject id", "subject_id",
        "course code", "course_code", "paper code", "subject no",
    ],
    "subjectName": [
        "subject name", "subject_name", "subjectname", "name", "subject", "course",
        "course name", "paper", "paper name", "title",
    ],
    "creditHours": [
        "credit hours", "credit_hours", "credithours", "credits", "hours", "periods",
        "lessons per week", "periods per week", "contact hours",
    ],
    "teacher": [
        "teacher", "subject teacher", "instructor", "tutor", "lecturer", "facilitator",
        "assigned teacher", "teacher name", "taught by",
    ],

    # Exam result fields
    "indexNumber": [
        "index number", "index_number", "indexnumber", "index no", "index", "candidate no",
        "candidate number", "exam no", "exam number", "examination number",
    ],
    "aggregateGrade": [
        "aggregate", "aggregate grade", "agg", "total aggregate", "overall grade",
        "final grade", "aggregate score",
    ],

    # Subject grade columns on exam result sheets
    "englishLanguage": ["english", "english language", "eng", "english lang", "engl"],
    "mathematics": ["mathematics", "maths", "math", "mtc", "mathamatics"],
    "physics": ["physics", "phy", "phys"],
    "chemistry": ["chemistry", "chem", "chm"],
    "biology": ["biology", "bio", "biol"],
    "geography": ["geography", "geo", "geog"],
    "history": ["history", "hist", "hst"],
    "commerce": ["commerce", "comm", "com"],
    "economics": ["economics", "econ", "eco"],
    "agriculture": ["agriculture", "agric", "agri", "ag"],
    "computerStudies": ["computer", "computer studies", "computers", "ict", "it", "computer science"],
    "religiousEducation": ["religion", "religious education", "re", "cre", "ire", "divinity"],
    "kiswahili": ["kiswahili", "swahili", "kisw"],
    "french": ["french", "fre", "frn"],
    "arabic": ["arabic", "arb"],
    "luganda": ["luganda", "lug"],
    "literature": ["literature", "lit", "literature in english"],
    "fineMathematics": ["fine mathematics", "add maths", "additional mathematics", "further maths"],
    "technicalDrawing": ["technical drawing", "td", "tech drawing"],
    "entrepreneurship": ["entrepreneurship", "ent", "business", "business studies"],
    "physicalEducation": ["pe", "physical education", "sports", "games"],
    "music": ["music", "mus"],
    "art": ["art", "fine art", "art and design", "visual arts"],
}
