# Copyright (c) 2026 The PhishLens Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Sample emails used by the end-to-end tests."""

VALID_EMAILS = {
    "valid_1": {
        "subject": "Weekly Team Meeting - Thursday 2PM",
        "sender": "sarah.johnson@company.com",
        "headers": {
            "Authentication-Results": "spf=pass dkim=pass dmarc=pass",
            "From": "Sarah Johnson <sarah.johnson@company.com>",
            "To": "team@company.com",
            "Date": "Wed, 13 Dec 2023 14:30:00 +0000",
            "Message-ID": "<abc123@company.com>",
        },
        "content": """Hi Team,

I hope this email finds you well. I wanted to remind everyone about our weekly team meeting scheduled for Thursday at 2:00 PM in Conference Room B.

Agenda:
- Project status updates
- Q4 planning discussion
- New client onboarding process
- Questions and feedback

Please bring your laptops and any relevant documents. If you can't attend, please let me know in advance.

Looking forward to seeing everyone there!

Best regards,
Sarah Johnson
Project Manager
Company Inc.
Phone: (555) 123-4567
Email: sarah.johnson@company.com""",
    },
    "valid_2": {
        "subject": "Your Order #ORD-2023-5678 Has Been Shipped",
        "sender": "orders@amazon.com",
        "headers": {
            "Authentication-Results": "spf=pass dkim=pass dmarc=pass",
            "From": "Amazon.com <orders@amazon.com>",
            "To": "customer@email.com",
            "Date": "Wed, 13 Dec 2023 10:15:00 +0000",
            "Message-ID": "<ord2023@amazon.com>",
        },
        "content": """Hello,

Your order has been shipped and is on its way!

Order Details:
- Order Number: ORD-2023-5678
- Items: Wireless Bluetooth Headphones
- Shipping Address: 123 Main St, Anytown, ST 12345
- Estimated Delivery: December 15, 2023

You can track your package using this link: https://amazon.com/track?order=ORD-2023-5678

Thank you for shopping with Amazon!

The Amazon Team""",
    },
    "hr_ethnic_day": {
        "subject": "Ethnic Day Celebration - Friday, December 15th",
        "sender": "hr@company.com",
        "headers": {
            "Authentication-Results": "spf=pass dkim=pass dmarc=pass",
            "From": "Human Resources <hr@company.com>",
            "To": "all-employees@company.com",
            "Date": "Wed, 13 Dec 2023 09:00:00 +0000",
            "Message-ID": "<ethnic2023@company.com>",
        },
        "content": """Dear Team,

We are excited to announce our annual Ethnic Day celebration happening this Friday, December 15th, from 12:00 PM to 3:00 PM in the main cafeteria.

\U0001F30D What to Expect:
- Traditional food from different cultures
- Cultural performances and presentations
- Traditional dress showcase
- Interactive cultural booths
- Music and dance from around the world

\U0001F3AD How to Participate:
- Wear your traditional/cultural attire
- Bring a dish representing your heritage (optional)
- Sign up for cultural presentations at the HR desk
- Invite your family members to join us (2:00 PM - 3:00 PM)

\U0001F4CB Important Details:
- Lunch will be provided for all participants
- Photography will be taken for our company newsletter
- Please RSVP by Thursday, December 14th
- Contact HR for any dietary restrictions or questions

This is a wonderful opportunity to learn about our diverse workplace and celebrate the rich cultural backgrounds of our team members.

Looking forward to a fantastic celebration!

Best regards,
HR Team
Company Inc.
Phone: (555) 123-4500
Email: hr@company.com

P.S. Prizes will be awarded for best traditional attire!""",
    },
}

SUSPICIOUS_EMAILS = {
    "suspicious_1": {
        "subject": "URGENT: Your Account Will Be Suspended Today!",
        "sender": "security@amaz0n-security.com",
        "headers": {
            "Authentication-Results": "spf=fail dkim=fail dmarc=fail",
            "From": "Amazon Security <security@amaz0n-security.com>",
            "To": "victim@email.com",
            "Date": "Wed, 13 Dec 2023 16:45:00 +0000",
            "Message-ID": "<fake123@suspicious-domain.tk>",
            "X-Originating-IP": "192.168.1.100",
            "X-Mailer": "PHP/7.4",
        },
        "content": """URGENT SECURITY ALERT!

Your Amazon account has been flagged for suspicious activity and will be SUSPENDED within 24 hours unless you verify your information immediately.

IMMEDIATE ACTION REQUIRED

To prevent account suspension, you must:
1. Click here to verify your account: http://amaz0n-verification.tk/secure-login
2. Confirm your credit card information
3. Update your password immediately

Don't wait - act now to secure your account!

Click here if you didn't request this: http://bit.ly/fake-unsubscribe""",
    },
    "suspicious_2": {
        "subject": "Congratulations! You've Won $1,000,000 in Our Lottery!",
        "sender": "lottery-winner@international-lottery.ml",
        "headers": {
            "Authentication-Results": "spf=none dkim=none dmarc=none",
            "From": "International Lottery Commission <lottery-winner@international-lottery.ml>",
            "To": "lucky-winner@email.com",
            "Date": "Wed, 13 Dec 2023 12:20:00 +0000",
            "Message-ID": "<lottery2023@fake-server.ga>",
            "X-Originating-IP": "45.123.456.789",
        },
        "content": """CONGRATULATIONS WINNER!

You have been selected as the GRAND PRIZE WINNER of our International Online Lottery!

To claim your prize money, you must:

1. Send us your full name and address
2. Provide your bank account details for transfer
3. Pay the processing fee of $500 (refundable from your winnings)
4. Send a copy of your government ID

URGENT: You have only 48 hours to claim this prize or it will be forfeited to the next winner!

P.S. This opportunity expires soon - don't let this fortune slip away!""",
    },
    "suspicious_3": {
        "subject": "Your PayPal payment failed - Update payment method",
        "sender": "service@paypaI-security.com",
        "headers": {
            "Authentication-Results": "spf=fail dkim=none dmarc=fail",
            "From": "PayPal Service <service@paypaI-security.com>",
            "To": "user@email.com",
            "Date": "Wed, 13 Dec 2023 15:30:00 +0000",
            "Message-ID": "<payment2023@fake-paypal.cf>",
        },
        "content": """Dear PayPal Customer,

We were unable to process your recent payment due to an issue with your payment method.

Verify Account: https://paypaI-secure-verification.herokuapp.com/login

If you don't complete this verification within 24 hours, your account may be permanently suspended.

For your security, PayPal will never ask for sensitive information via email. However, due to the urgent nature of this security issue, immediate action is required.""",
    },
    "phishing_credential_theft": {
        "subject": "Company IT Security Update Required",
        "sender": "it-security@company-secure.tk",
        "headers": {
            "Authentication-Results": "spf=fail dkim=fail dmarc=fail",
            "From": "IT Security <it-security@company-secure.tk>",
            "To": "employees@company.com",
            "Date": "Wed, 13 Dec 2023 11:30:00 +0000",
            "Message-ID": "<security2023@fake-company.tk>",
            "X-Originating-IP": "203.0.113.100",
        },
        "content": """URGENT SECURITY UPDATE REQUIRED

Dear Employee,

Your company credentials need to be updated within the next 4 hours to prevent account lockout.

CLICK HERE TO UPDATE YOUR CREDENTIALS: http://company-secure-portal.tk/update-login

Complete your update immediately to maintain access to company systems.

IT Security Department
URGENT - DO NOT IGNORE""",
    },
    "phishing_promotion_salary": {
        "subject": "Congratulations on Your Promotion! View Your Updated Salary Package",
        "sender": "hr-updates@company-careers.co",
        "headers": {
            "Authentication-Results": "spf=fail dkim=none dmarc=fail",
            "From": "HR Updates <hr-updates@company-careers.co>",
            "To": "you@company.com",
            "Date": "Wed, 13 Dec 2023 17:20:00 +0000",
            "Message-ID": "<promo2023@careers-co.co>",
        },
        "content": """<div style="font-family: Arial, sans-serif;">
  <div style="font-size:16px; color:#334155; margin-top:6px;">You have been selected for a promotion effective immediately.</div>
  <a href="http://company-careers.co-portal.com/salary/structure?emp=you">View Salary Structure</a>
  <div style="margin-top:14px; font-size:12px; color:#6b7280;">
    If the link does not work, copy and paste the following into your browser: <br/>
    http://company-careers.co-portal.com/salary/structure?emp=you
  </div>
</div>""",
    },
}
