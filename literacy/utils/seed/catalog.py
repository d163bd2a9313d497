"""The fixed course catalog loaded into the database at startup."""

CATALOG = [
    {
        "id": "computer-basics",
        "title": "Computer Basics",
        "description": "What a computer is made of and how to use the keyboard and mouse.",
        "icon": "monitor",
        "order_index": 1,
        "content": (
            "A computer is a machine that accepts input, processes it and produces output.\n\n"
            "Hardware is every physical part of the computer: the system unit, monitor, keyboard, "
            "mouse and printer. Software is the set of programs that tell the hardware what to do.\n\n"
            "The processor (CPU) performs calculations. Random access memory (RAM) holds the programs "
            "and data in use and is cleared when the computer is switched off. The hard drive or SSD "
            "keeps files permanently.\n\n"
            "Input devices send information into the computer (keyboard, mouse, microphone, scanner). "
            "Output devices present results (monitor, printer, speakers).\n\n"
            "Always shut the computer down through the operating system menu instead of pulling the plug."
        ),
        "questions": [
            {
                "question_text": "Which of these is an input device?",
                "options": ["Keyboard", "Monitor", "Printer", "Speakers"],
                "correct_answer": 0,
            },
            {
                "question_text": "Which component performs the computer's calculations?",
                "options": ["Monitor", "Processor (CPU)", "Mouse", "Power cable"],
                "correct_answer": 1,
            },
            {
                "question_text": "What happens to the contents of RAM when the computer is switched off?",
                "options": ["They are printed", "They are saved to the cloud", "They are erased", "Nothing"],
                "correct_answer": 2,
            },
            {
                "question_text": "Which of these is software?",
                "options": ["Keyboard", "Hard drive", "Monitor", "Text editor"],
                "correct_answer": 3,
            },
            {
                "question_text": "How should you switch off a computer?",
                "options": [
                    "Through the operating system's shut down menu",
                    "By pulling the plug",
                    "By holding the monitor button",
                    "By closing every window",
                ],
                "correct_answer": 0,
            },
        ],
    },
    {
        "id": "files-and-folders",
        "title": "Files and Folders",
        "description": "Organising documents with the operating system's file manager.",
        "icon": "folder",
        "order_index": 2,
        "content": (
            "The operating system (Windows, macOS, Linux) manages the computer's hardware and lets you "
            "run programs.\n\n"
            "Information is stored in files. Every file has a name and an extension that tells which "
            "program opens it: .docx for documents, .xlsx for spreadsheets, .jpg and .png for pictures.\n\n"
            "Folders group related files. A folder can contain other folders, forming a tree.\n\n"
            "Deleted files first go to the Recycle Bin, from which they can be restored until it is emptied.\n\n"
            "Keyboard shortcuts speed up work: Ctrl+C copies, Ctrl+V pastes, Ctrl+X cuts, Ctrl+Z undoes."
        ),
        "questions": [
            {
                "question_text": "Which of these is an operating system?",
                "options": ["Windows", "Microsoft Word", "Google Chrome", "Skype"],
                "correct_answer": 0,
            },
            {
                "question_text": "Which extension usually belongs to a picture?",
                "options": [".docx", ".jpg", ".xlsx", ".exe"],
                "correct_answer": 1,
            },
            {
                "question_text": "Where does a deleted file usually go first?",
                "options": ["To the printer", "To e-mail", "To the Recycle Bin", "It disappears forever"],
                "correct_answer": 2,
            },
            {
                "question_text": "Which shortcut pastes copied content?",
                "options": ["Ctrl+C", "Ctrl+Z", "Ctrl+X", "Ctrl+V"],
                "correct_answer": 3,
            },
            {
                "question_text": "What is a folder used for?",
                "options": [
                    "Grouping related files",
                    "Speeding up the processor",
                    "Connecting to the internet",
                    "Printing documents",
                ],
                "correct_answer": 0,
            },
        ],
    },
    {
        "id": "internet-and-email",
        "title": "Internet and E-mail",
        "description": "Browsing the web, searching for information and writing e-mail.",
        "icon": "globe",
        "order_index": 3,
        "content": (
            "The internet is a worldwide network of computers. A web browser (Chrome, Firefox, Edge) "
            "displays web pages.\n\n"
            "Every page has an address (URL) such as https://example.com. The https prefix means the "
            "connection is encrypted.\n\n"
            "Search engines find pages by keywords. Use precise words and check several sources.\n\n"
            "An e-mail address has the form name@domain, for example aigerim@example.com. A message has "
            "a recipient, a subject and a body and may carry attachments.\n\n"
            "Use CC to send a copy to someone else, and reply to all only when everyone needs the answer."
        ),
        "questions": [
            {
                "question_text": "Which program is used to view web pages?",
                "options": ["Web browser", "Calculator", "Paint", "File manager"],
                "correct_answer": 0,
            },
            {
                "question_text": "Which of these is a valid e-mail address?",
                "options": ["aigerim.example.com", "aigerim@example.com", "@aigerim", "www.aigerim"],
                "correct_answer": 1,
            },
            {
                "question_text": "What does the https prefix in an address mean?",
                "options": [
                    "The site is free",
                    "The site is popular",
                    "The connection is encrypted",
                    "The site has no adverts",
                ],
                "correct_answer": 2,
            },
            {
                "question_text": "What is a file sent together with an e-mail called?",
                "options": ["Subject", "Signature", "Recipient", "Attachment"],
                "correct_answer": 3,
            },
            {
                "question_text": "What does a search engine do?",
                "options": [
                    "Finds web pages by keywords",
                    "Repairs the computer",
                    "Sends text messages",
                    "Deletes viruses",
                ],
                "correct_answer": 0,
            },
        ],
    },
    {
        "id": "digital-safety",
        "title": "Digital Safety",
        "description": "Strong passwords, phishing and protecting personal data.",
        "icon": "shield",
        "order_index": 4,
        "content": (
            "A strong password is long and mixes upper and lower case letters, digits and symbols. "
            "Use a different password for every service and never share it.\n\n"
            "Phishing messages pretend to come from a bank or a well-known company and ask you to "
            "enter a password or card number on a fake site. Check the sender and the link address.\n\n"
            "Antivirus software and regular updates protect the computer from malware.\n\n"
            "Two-factor authentication adds a second check, such as a code sent to your phone.\n\n"
            "Think before publishing personal data (address, phone number, documents) on social networks."
        ),
        "questions": [
            {
                "question_text": "Which password is the strongest?",
                "options": ["T7#qL9!vR2m", "123456", "password", "qwerty"],
                "correct_answer": 0,
            },
            {
                "question_text": "What is phishing?",
                "options": [
                    "A kind of computer game",
                    "An attempt to steal data through a fake message or site",
                    "A way to speed up the internet",
                    "A file format",
                ],
                "correct_answer": 1,
            },
            {
                "question_text": "What protects the computer from malware?",
                "options": ["A bigger monitor", "A new mouse", "Antivirus software and updates", "Brighter screen"],
                "correct_answer": 2,
            },
            {
                "question_text": "What does two-factor authentication add?",
                "options": [
                    "A second monitor",
                    "A faster connection",
                    "A shorter password",
                    "A second check such as a code on your phone",
                ],
                "correct_answer": 3,
            },
            {
                "question_text": "Should you use the same password for every service?",
                "options": [
                    "No, every service needs its own password",
                    "Yes, it is easier to remember",
                    "Only for e-mail",
                    "Only for social networks",
                ],
                "correct_answer": 0,
            },
        ],
    },
]
